"""
Backend package: Flask JSON API over the codegen core.
"""

from .app import app, create_app

__all__ = ["app", "create_app"]
