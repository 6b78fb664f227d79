"""HTTP surface for the translation service."""

from .app import API_PREFIX, create_app

__all__ = ["create_app", "API_PREFIX"]
