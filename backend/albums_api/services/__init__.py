"""
Album Catalog API - Services Layer
==================================

What:  Data access sitting between routes (HTTP) and the album records.

Service Inventory:
    - Catalog: ordered, immutable collection of Album records
    - default_catalog(): the records the service ships with
    - get_catalog(): FastAPI dependency handing the app's catalog to routes
"""
