"""Command line entry points for utf-core."""
from .main import app

__all__ = ["app"]
