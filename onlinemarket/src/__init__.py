"""
Online Market Product Collector

Collects product data from the Online Market catalog API.
"""

__version__ = "1.0.0"

from .collector import OnlineMarketCollector

__all__ = ["OnlineMarketCollector"]
