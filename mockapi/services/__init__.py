"""
Use cases for the mock API.

Each service module composes the CollectionStore to implement one area of
the dashboard (addresses, contacts, organizations, ...). Routers call these
services instead of touching the store or the JSON files directly.
"""
