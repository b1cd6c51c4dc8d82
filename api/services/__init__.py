"""
Use cases for the users API.

Routers (FastAPI endpoints) call these services instead of touching the
repositories directly.
"""
