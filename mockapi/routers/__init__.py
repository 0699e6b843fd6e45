"""
FastAPI routers grouped by dashboard area (addresses, contacts, organizations...).

Each module exposes an APIRouter included by the application factory under
the /api/mock prefix. Handlers stay thin: resolve the service from the app
state, call it inside internal_errors(), return the record.
"""
