"""
FastAPI routers grouped by domain.

Each module exposes an APIRouter included by the application factory in
app.py.
"""
