"""
Album Catalog API - Application Package
=======================================

What: Read-only HTTP service that serves a fixed catalog of albums as JSON.
Who:  Imported by uvicorn (``uvicorn albums_api.main:app``) and by pytest.

Architecture Note:
    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │        Services (Catalog access)    │  ← Ordered, immutable record store
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← Album records + Pydantic contracts
    └─────────────────────────────────────┘

    The catalog is built once at startup and handed to the routes through
    ``app.state`` and a FastAPI dependency. Nothing writes to it afterwards.
"""

__version__ = "1.0.0"
