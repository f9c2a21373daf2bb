"""
Album Catalog API - Middleware Package
======================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (outermost first):
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → [Fault Isolation] → Route Handler

    Request ID runs first so every later layer (and every log line) sees the
    correlation ID. Fault Isolation sits innermost so the 500 it produces flows
    back out through CORS, logging and the request ID header like any other
    response.
"""
