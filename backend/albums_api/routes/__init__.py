"""
Album Catalog API - Routes Package
==================================

Route Inventory:
    - albums.py:  GET /albums   (full catalog as a JSON array)
    - health.py:  GET /health   (service health check)

Routes are thin: they pull the catalog from a dependency and shape the
response. They never catch exceptions; faults go to the serving layer.
"""
