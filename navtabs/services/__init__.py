"""Application services for navtabs."""

from . import navigation

__all__ = ["navigation"]
