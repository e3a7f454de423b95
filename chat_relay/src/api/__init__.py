"""API package for the chat relay service.

This package contains the API endpoints, middleware and request schemas.
"""

from .core import setup_api

__all__ = ["setup_api"]
