"""HTTP interface for the converters."""

from .app import app

__all__ = ["app"]
