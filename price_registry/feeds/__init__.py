"""Price feed implementations."""
from .pyth import PythPriceFeed
from .static import StaticPriceFeed

__all__ = ["PythPriceFeed", "StaticPriceFeed"]
