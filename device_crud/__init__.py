"""
Device CRUD Backend root package.

This package contains the FastAPI app entry point (main.py), API routes,
the device domain (state lifecycle, id generation, validation), the
MongoDB infrastructure and the dependency injection container.
"""
