#!/usr/bin/env python3
"""
Online Market Product Collector - CLI Entry Point

Fetches the category list, collects every product and reports the total.
"""

import argparse
import logging
import os
import sys
from typing import Any, Callable, Dict, List, Optional

import requests

# Add current directory and repository root to path for imports
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, os.path.join(os.path.dirname(os.path.abspath(__file__)), '..'))

from shared.http_utils import build_browser_headers
from shared.utils.logging_utils import (
    log_and_status,
    log_error,
    log_section_header,
    log_success,
)
from src.collector import OnlineMarketCollector
from src.config import load_config


def setup_logging(log_file: str = ""):
    """
    Setup logging configuration with dual output (console + file).

    Args:
        log_file: Path to log file (blank = console only)
    """
    handlers = [
        logging.StreamHandler(sys.stdout)
    ]

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
        handlers=handlers,
        force=True
    )


def run(
    config: Dict[str, Any],
    http_get: Callable[..., Any] = requests.get,
    status_fn: Optional[Callable] = None
) -> List[Dict[str, Any]]:
    """
    Run one collection pass.

    Args:
        config: Collector configuration
        http_get: HTTP GET function
        status_fn: Optional status callback for user-facing messages

    Returns:
        Collected products (empty if nothing was found or anything failed)
    """
    try:
        log_section_header(status_fn, "Starting product collection process...")
        collector = OnlineMarketCollector(config, http_get=http_get, status_fn=status_fn)
        category_list = collector.fetch_category_list()

        if not category_list:
            log_and_status(
                status_fn,
                "No categories found or an error occurred while fetching them. Exiting."
            )
            return []

        products = collector.collect_product_data(category_list)

        log_success(
            status_fn,
            f"Product collection process finished. Total products collected: {len(products)}"
        )
        return products

    except Exception as e:
        log_error(
            status_fn,
            f"Critical error in main execution: {e}. Process stopped.",
            exc=e
        )
        return []


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Online Market Product Collector")
    parser.add_argument("--config", help="Path to config JSON file")
    parser.add_argument("--base-url", help="Catalog API base URL")
    parser.add_argument("--timeout", type=float, help="Request timeout in seconds")
    parser.add_argument("--log-file", help="Path to log file")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI."""
    args = parse_args(argv)

    cfg = load_config(args.config)
    if args.base_url:
        cfg["base_url"] = args.base_url
    if args.timeout is not None:
        cfg["timeout"] = args.timeout
    if args.log_file:
        cfg["log_file"] = args.log_file

    setup_logging(cfg.get("log_file", ""))

    session = requests.Session()
    session.headers.update(build_browser_headers(
        cfg["base_url"],
        user_agent=cfg.get("user_agent") or None
    ))

    try:
        run(cfg, http_get=session.get)
        return 0

    except KeyboardInterrupt:
        logging.warning("Collection interrupted by user")
        return 130

    finally:
        session.close()


if __name__ == "__main__":
    sys.exit(main())
