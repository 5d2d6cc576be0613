"""
Schemas module - Request/Response schemas for API endpoints.

The API contract (what clients send and receive) lives in schemas.py.
Table layout lives in app.db.tables.
"""
