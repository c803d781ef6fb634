#!/usr/bin/env python3
"""
Online Market Product Collector

Walks the catalog API category by category and gathers every product into
one flat list. A category whose product total fits in a single API call is
taken directly; a larger one is split into its subcategories, each of which
is fetched once (first page only).
"""

import os
import sys
from typing import Any, Callable, Dict, List, Optional

import requests

# Add parent directories to path for shared imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '../..'))

from shared.utils.logging_utils import (
    log_and_status,
    log_error,
    log_progress,
    log_summary,
    log_warning,
)
from src.catalog import OnlineMarketCatalog
from src.config import DEFAULT_CONFIG
from src.models import Category, PagedProductBatch, Product


class OnlineMarketCollector:
    """
    Online Market product data collector.

    Traversal is strictly sequential. The product list built by
    collect_product_data() is owned by that call and handed to the
    processors as `all_products`; they are its only writers and only append.
    Do not share one collector instance between threads.
    """

    def __init__(
        self,
        config: Optional[Dict[str, Any]] = None,
        http_get: Callable[..., Any] = requests.get,
        status_fn: Optional[Callable] = None
    ):
        """
        Initialize collector.

        Args:
            config: Optional collector configuration (defaults to DEFAULT_CONFIG)
            http_get: HTTP GET function (requests.get or Session.get)
            status_fn: Optional status callback for user-facing messages
        """
        self.config = config or DEFAULT_CONFIG
        self.status_fn = status_fn
        self.catalog = OnlineMarketCatalog(self.config, http_get=http_get, status_fn=status_fn)
        self.stats: Dict[str, int] = self._empty_stats()

    @staticmethod
    def _empty_stats() -> Dict[str, int]:
        return {
            "categories_processed": 0,
            "categories_direct": 0,
            "categories_split": 0,
            "subcategories_processed": 0,
            "subcategories_incomplete": 0,
            "products_collected": 0,
        }

    def _log_batch(self, kind: str, node: Category, batch: PagedProductBatch) -> None:
        log_and_status(
            self.status_fn,
            f"{kind} {node.name}: Total products = {batch.total_products}, "
            f"Fetched in this call = {len(batch.products)}, "
            f"API reported count = {batch.count}, Limit = {batch.limit}"
        )

    def fetch_category_list(self) -> List[Category]:
        """Fetch the top-level categories; errors are logged and re-raised."""
        return self.catalog.fetch_category_list()

    def process_subcategory(self, subcategory: Category, all_products: List[Product]) -> None:
        """
        Fetch one subcategory's product page and append it to all_products.

        Only the first page is fetched. When the API reports more products
        than its per-call limit the page is still appended and a warning is
        logged; no further pagination is attempted.

        Args:
            subcategory: Subcategory to process
            all_products: Accumulator owned by the caller (appended to)
        """
        log_and_status(
            self.status_fn,
            f"Processing subcategory: {subcategory.name} (ID: {subcategory.id})"
        )
        batch = self.catalog.fetch_subcategory_products(subcategory)
        self._log_batch("Subcategory", subcategory, batch)

        all_products.extend(batch.products)
        self.stats["subcategories_processed"] += 1

        if batch.is_exhaustive:
            log_and_status(
                self.status_fn,
                f"All data fetched for subcategory {subcategory.name}. "
                f"{len(batch.products)} products added."
            )
        else:
            self.stats["subcategories_incomplete"] += 1
            log_warning(
                self.status_fn,
                f"Subcategory {subcategory.name} may be incomplete",
                details=(
                    f"Total products ({batch.total_products}) exceed call limit ({batch.limit}). "
                    f"Added {len(batch.products)} products (first page only)."
                )
            )

    def process_category(self, category: Category, all_products: List[Product]) -> None:
        """
        Collect one category's products into all_products.

        If the category's total fits within the API limit, the first page is
        the whole category and is appended as is. Otherwise that page is
        dropped and every subcategory is processed in API order instead.
        Any fetch failure propagates and stops the traversal.

        Args:
            category: Top-level category to process
            all_products: Accumulator owned by the caller (appended to)
        """
        log_and_status(
            self.status_fn,
            f"Processing category: {category.name} (ID: {category.id})"
        )
        batch = self.catalog.fetch_category_products(category)
        self._log_batch("Category", category, batch)
        self.stats["categories_processed"] += 1

        if batch.is_exhaustive:
            log_and_status(
                self.status_fn,
                f"All products for {category.name} ({len(batch.products)}) fetched directly."
            )
            all_products.extend(batch.products)
            self.stats["categories_direct"] += 1
            return

        log_and_status(
            self.status_fn,
            f"Total products for {category.name} ({batch.total_products}) "
            f"exceed limit ({batch.limit}). Fetching subcategories."
        )
        self.stats["categories_split"] += 1

        subcategories = self.catalog.fetch_subcategory_list(category)
        log_and_status(
            self.status_fn,
            f"Fetched {len(subcategories)} subcategories for {category.name}."
        )

        for subcategory in subcategories:
            self.process_subcategory(subcategory, all_products)

    def collect_product_data(self, category_list: List[Category]) -> List[Product]:
        """
        Collect the products of every category in order.

        Args:
            category_list: Categories to traverse

        Returns:
            All collected products, or an empty list if any fetch failed.
            Products gathered before a failure are discarded.
        """
        self.stats = self._empty_stats()
        all_products: List[Product] = []

        try:
            total = len(category_list)
            for i, category in enumerate(category_list, 1):
                log_progress(self.status_fn, i, total, category.name, details=f"ID: {category.id}")
                self.process_category(category, all_products)
        except Exception as e:
            log_error(
                self.status_fn,
                "Error during product collection process, returning empty data",
                details=f"{len(all_products)} products discarded",
                exc=e
            )
            return []

        self.stats["products_collected"] = len(all_products)
        log_summary(self.status_fn, "COLLECTION SUMMARY", self.stats)
        return all_products
