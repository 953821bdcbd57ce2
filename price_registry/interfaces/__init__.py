"""Protocol interfaces for the price registry."""
from .price_feed import PriceFeed

__all__ = ["PriceFeed"]
