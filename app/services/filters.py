"""
MongoDB query construction for the product listing endpoints
"""

from typing import Any, Dict, Optional

FEATURED_QUERY = {"featured": True}


def price_below_query(value: float) -> Dict[str, Any]:
    """Products strictly cheaper than value"""
    return {"price": {"$lt": value}}


def rating_above_query(value: float) -> Dict[str, Any]:
    """Products rated strictly higher than value"""
    return {"rating": {"$gt": value}}


def build_filter_query(
    price: Optional[float] = None,
    rating: Optional[float] = None,
    featured: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Combine the filters that are present with AND semantics.

    - price: price <= value
    - rating: rating > value
    - featured: featured == (value == "true")

    Absent (None or empty) filters are not applied, so no arguments means
    every product.
    """
    query: Dict[str, Any] = {}
    if price is not None:
        query["price"] = {"$lte": price}
    if rating is not None:
        query["rating"] = {"$gt": rating}
    if featured:
        query["featured"] = featured == "true"
    return query
