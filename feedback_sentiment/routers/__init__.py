"""
API routers.
"""

from . import feedback, sentiment

__all__ = ["feedback", "sentiment"]
