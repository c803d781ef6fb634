"""
Catalog API access for the Online Market collector.

Builds endpoint URLs relative to the configured base URL and fetches
categories, subcategories and product pages.
"""

import os
import sys
from typing import Any, Callable, Dict, List, Optional

import requests

# Add parent directories to path for shared imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '../..'))

from shared.http_utils import fetch_json
from shared.utils.logging_utils import log_and_status, log_error
from src.config import BASE_URL
from src.models import Category, PagedProductBatch


class OnlineMarketCatalog:
    """Read-only client for the Online Market catalog API."""

    def __init__(
        self,
        config: Optional[Dict[str, Any]] = None,
        http_get: Callable[..., Any] = requests.get,
        status_fn: Optional[Callable] = None
    ):
        """
        Initialize catalog client.

        Args:
            config: Collector configuration ("base_url", "timeout")
            http_get: HTTP GET function (requests.get or Session.get)
            status_fn: Optional status callback for user-facing messages
        """
        config = config or {}
        self.base_url = (config.get("base_url") or BASE_URL).rstrip("/")
        self.timeout = config.get("timeout")
        self.http_get = http_get
        self.status_fn = status_fn

    # Endpoint URLs

    def categories_url(self) -> str:
        return f"{self.base_url}/categories"

    def subcategories_url(self, category: Category) -> str:
        return f"{self.base_url}/categories/{category.id}/subcategories"

    def category_products_url(self, category: Category) -> str:
        return f"{self.base_url}/products?category={category.id}"

    def subcategory_products_url(self, subcategory: Category) -> str:
        return f"{self.base_url}/products?subcategory={subcategory.id}"

    # Fetchers

    def _get(self, url: str, error_message_prefix: str) -> Any:
        return fetch_json(url, error_message_prefix, http_get=self.http_get, timeout=self.timeout)

    def fetch_category_list(self) -> List[Category]:
        """
        Fetch the top-level categories.

        Returns:
            Categories in API order (may be empty)

        Raises:
            Exception: Any fetch or parse failure, after logging it
        """
        try:
            data = self._get(self.categories_url(), "Failed to fetch category list")
            categories = [Category.from_dict(item) for item in data or []]
            log_and_status(self.status_fn, f"Successfully fetched {len(categories)} categories.")
            return categories
        except Exception as e:
            log_error(self.status_fn, "Error in fetch_category_list", details=str(e), exc=e)
            raise

    def fetch_subcategory_list(self, category: Category) -> List[Category]:
        """Fetch the subcategories of one category, in API order."""
        data = self._get(
            self.subcategories_url(category),
            f"Failed to fetch subcategories for {category.name}"
        )
        return [Category.from_dict(item) for item in data or []]

    def fetch_category_products(self, category: Category) -> PagedProductBatch:
        """Fetch the first product page of a category."""
        data = self._get(
            self.category_products_url(category),
            f"Failed to fetch products for category {category.name}"
        )
        return PagedProductBatch.from_dict(data)

    def fetch_subcategory_products(self, subcategory: Category) -> PagedProductBatch:
        """Fetch the first product page of a subcategory."""
        data = self._get(
            self.subcategory_products_url(subcategory),
            f"Failed to fetch products for subcategory {subcategory.name}"
        )
        return PagedProductBatch.from_dict(data)
