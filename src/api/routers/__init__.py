"""API routers."""

from . import flights

__all__ = ["flights"]
