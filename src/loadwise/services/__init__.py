"""Analytics services."""

from .engine import AnalyticsEngine, assess, get_engine

__all__ = [
    "AnalyticsEngine",
    "assess",
    "get_engine",
]
