from __future__ import annotations

from .search.engine import InvalidArgument
from .search.models import Restaurant

NO_MATCHES = "No matches found."


def format_restaurant(restaurant: Restaurant) -> str:
    return (
        f"{restaurant.name} | Rating: {restaurant.rating} | Distance: {restaurant.distance} "
        f"| Price: {restaurant.price} | Cuisine: {restaurant.cuisine}"
    )


def format_results(results: list[Restaurant]) -> str:
    """Render ranked results as numbered lines, one restaurant per line."""
    if not results:
        return NO_MATCHES
    return "\n".join(
        f"{position}).  {format_restaurant(r)}" for position, r in enumerate(results, start=1)
    )


def parse_optional_int(text: str | None, label: str) -> int | None:
    """Parse a form value; blank input means the criterion is not set."""
    if text is None or not text.strip():
        return None
    try:
        return int(text.strip())
    except ValueError:
        raise InvalidArgument(label.lower(), f"{label} must be a whole number.", value=text) from None
