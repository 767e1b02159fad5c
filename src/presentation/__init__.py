"""Presentation layer - API endpoints and HTTP concerns.

Routers are thin: they parse the request, call an application service,
and translate the Result into a response envelope.

Structure:
- routers/system.py: Banner and health check
- routers/api/v1/: /api/auth credential and profile endpoints
- routers/api/middleware/: Bearer identity dependency, trace middleware
"""
