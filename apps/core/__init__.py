"""
Core app - Shared HTTP plumbing.

This app provides the pieces every API app relies on:
- JSON error handlers for the NinjaAPI (errors.py)
- Request logging middleware (middleware.py)
- Service status and server error views (views.py)
"""
