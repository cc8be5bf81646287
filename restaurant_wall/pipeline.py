"""Filter and sort pipeline over an in-memory restaurant collection.

Everything here is pure: the same inputs always give the same output and the
input collection is never modified.
"""

from collections.abc import Callable, Iterable
from typing import Any

from restaurant_wall.models import (
    CUISINE_FILTER_ALL,
    PRICE_FILTER_ALL,
    Restaurant,
    SortKey,
)

# sort key -> (key function, descending)
_SORT_ORDERS: dict[SortKey, tuple[Callable[[Restaurant], Any], bool]] = {
    SortKey.NEWEST: (lambda r: r.timestamp, True),
    SortKey.OLDEST: (lambda r: r.timestamp, False),
    SortKey.RATING: (lambda r: r.rating, True),
    SortKey.PRICE_ASC: (lambda r: r.price_range.tier, False),
    SortKey.PRICE_DESC: (lambda r: r.price_range.tier, True),
}


def matches_search(restaurant: Restaurant, search_term: str) -> bool:
    """Case-insensitive substring match on name or description."""
    term = search_term.lower()
    return term in restaurant.name.lower() or term in restaurant.description.lower()


def matches_cuisine(restaurant: Restaurant, cuisine_filter: str) -> bool:
    """True when the filter is "All" or names the restaurant's cuisine."""
    return cuisine_filter == CUISINE_FILTER_ALL or restaurant.cuisine == cuisine_filter


def matches_price(restaurant: Restaurant, price_filter: str) -> bool:
    """True when the filter is "all" or is the restaurant's price symbol."""
    return price_filter == PRICE_FILTER_ALL or restaurant.price_range == price_filter


def filter_restaurants(
    restaurants: Iterable[Restaurant],
    search_term: str = "",
    cuisine_filter: str = CUISINE_FILTER_ALL,
    price_filter: str = PRICE_FILTER_ALL,
) -> list[Restaurant]:
    """Keep the restaurants that pass every filter, in their original order."""
    return [
        restaurant
        for restaurant in restaurants
        if matches_search(restaurant, search_term)
        and matches_cuisine(restaurant, cuisine_filter)
        and matches_price(restaurant, price_filter)
    ]


def sort_restaurants(
    restaurants: Iterable[Restaurant], sort_by: str
) -> list[Restaurant]:
    """Order restaurants by a sort key.

    The sort is stable, so ties keep their incoming order. An unknown key
    leaves the order untouched.
    """
    try:
        key, descending = _SORT_ORDERS[SortKey(sort_by)]
    except ValueError:
        return list(restaurants)

    return sorted(restaurants, key=key, reverse=descending)


def filter_and_sort(
    restaurants: Iterable[Restaurant],
    search_term: str,
    cuisine_filter: str,
    price_filter: str,
    sort_by: str,
) -> list[Restaurant]:
    """Apply the filters, then the sort."""
    filtered = filter_restaurants(
        restaurants, search_term, cuisine_filter, price_filter
    )
    return sort_restaurants(filtered, sort_by)
