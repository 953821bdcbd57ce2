"""Service modules."""
from .builder import build_registry

__all__ = ["build_registry"]
