"""JSON API over the tender extractors."""

from .app import create_app

__all__ = ["create_app"]
