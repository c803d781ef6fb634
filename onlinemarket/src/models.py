"""
Data models for the Online Market collector.

Categories and product pages as returned by the catalog API. Products
themselves stay plain dictionaries: the collector passes them through
without imposing a schema.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Union


Product = Dict[str, Any]


@dataclass(frozen=True)
class Category:
    """
    A category or subcategory node in the catalog.

    Attributes:
        id: API identifier, used to build product and subcategory URLs
        name: Display name
    """
    id: str
    name: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Category":
        return cls(id=str(data["id"]), name=data.get("name") or "")


@dataclass
class PagedProductBatch:
    """
    One page of products for a category or subcategory.

    Attributes:
        total_products: Products that exist server-side for the query
        count: Products the API says it returned in this call
        limit: Maximum products the API returns per call
        products: Product records in this page
    """
    total_products: Union[int, float]
    count: Union[int, float]
    limit: Union[int, float]
    products: List[Product] = field(default_factory=list)

    @property
    def is_exhaustive(self) -> bool:
        """True when this single page holds every product for the query."""
        return self.total_products <= self.limit

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PagedProductBatch":
        products = list(data.get("products") or [])
        return cls(
            total_products=_as_number(data["totalProducts"]),
            count=_as_number(data.get("count", len(products))),
            limit=_as_number(data["limit"]),
            products=products,
        )


def _as_number(value: Any) -> Union[int, float]:
    """Keep JSON numbers as sent; numeric strings are parsed without truncation."""
    if isinstance(value, bool):
        raise ValueError(f"Expected a number, got {value!r}")
    if isinstance(value, (int, float)):
        return value
    number = float(value)
    return int(number) if number.is_integer() else number
