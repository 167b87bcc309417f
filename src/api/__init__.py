"""
HTTP host for terrain map generation.

- FastAPI application factory
- Server entry point
"""

from .server import create_app, main

__all__ = ["create_app", "main"]
