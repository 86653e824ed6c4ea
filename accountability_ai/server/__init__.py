"""
Accountability AI HTTP server.

FastAPI application exposing the focus session, check-in, coaching, prayer,
To-Do and voice APIs. The ASGI app lives in ``accountability_ai.server.main``.
"""
