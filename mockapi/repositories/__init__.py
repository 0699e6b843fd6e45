"""
Persistence adapters.

Services depend on the CollectionStore rather than touching the JSON files
directly, so the backing store can change without touching the routers.
"""
