"""Infrastructure modules for navtabs."""

from . import config_store

__all__ = ["config_store"]
