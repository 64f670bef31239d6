from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

import pandas as pd

from ..catalog.config import CatalogConfig
from ..catalog.loader import load_catalog, load_cuisines, load_restaurants
from .constants import (
    DISTANCE_RANGE,
    MAX_RESULTS,
    PRICE_RANGE,
    RANKING_ASCENDING,
    RANKING_COLUMNS,
    RATING_RANGE,
)
from .models import Restaurant, SearchCriteria

logger = logging.getLogger(__name__)


class InvalidArgument(ValueError):
    """A search criterion falls outside its valid range."""

    def __init__(
        self,
        field: str,
        message: str,
        minimum: int | None = None,
        maximum: int | None = None,
        value: object = None,
    ) -> None:
        super().__init__(message)
        self.field = field
        self.message = message
        self.minimum = minimum
        self.maximum = maximum
        self.value = value


def _check_range(field: str, value: int | None, bounds: tuple[int, int]) -> None:
    if value is None:
        return
    low, high = bounds
    if value < low or value > high:
        raise InvalidArgument(
            field,
            f"{field} must be between {low} and {high} (got {value}).",
            minimum=low,
            maximum=high,
            value=value,
        )


def validate_criteria(criteria: SearchCriteria) -> None:
    """Raise :class:`InvalidArgument` for the first out-of-range numeric criterion."""
    _check_range("rating", criteria.rating, RATING_RANGE)
    _check_range("distance", criteria.distance, DISTANCE_RANGE)
    _check_range("price", criteria.price, PRICE_RANGE)


class RestaurantSearch:
    """
    Filter and rank an in-memory restaurant catalog.

    The catalog is snapshotted at construction and never written afterwards,
    so one instance can serve any number of searches, from any number of
    callers, without locking.
    """

    def __init__(self, catalog: Iterable[Restaurant]) -> None:
        self._catalog: tuple[Restaurant, ...] = tuple(catalog)

        df = pd.DataFrame(
            [r.model_dump() for r in self._catalog],
            columns=list(Restaurant.model_fields),
        )
        # Case-folded name and cuisine for case-insensitive lookup
        df["name_folded"] = df["name"].astype(str).str.casefold()
        df["cuisine_folded"] = df["cuisine"].astype(str).str.casefold()
        self._df = df

    @classmethod
    def from_csv(cls, restaurant_file: str | Path, cuisine_file: str | Path) -> RestaurantSearch:
        cuisines = load_cuisines(Path(cuisine_file))
        return cls(load_restaurants(Path(restaurant_file), cuisines))

    @classmethod
    def from_config(cls, config: CatalogConfig) -> RestaurantSearch:
        return cls(load_catalog(config))

    @property
    def catalog(self) -> tuple[Restaurant, ...]:
        return self._catalog

    def __len__(self) -> int:
        return len(self._catalog)

    def cuisines(self) -> list[str]:
        """Return the distinct cuisine names present in the catalog."""
        return sorted({r.cuisine for r in self._catalog})

    def search(self, criteria: SearchCriteria | None = None) -> list[Restaurant]:
        """
        Return up to five best matches for ``criteria``.

        All active criteria must hold. Matches are ordered by distance
        (ascending), then rating (descending), then price (ascending);
        remaining ties have no guaranteed order. Name and cuisine match as
        case-folded substrings, untrimmed; ``None`` and ``""`` impose no
        constraint.

        Raises:
            InvalidArgument: rating, distance or price is out of range.
        """
        if criteria is None:
            criteria = SearchCriteria()
        validate_criteria(criteria)

        df = self._df
        mask = pd.Series(True, index=df.index)

        # --- Hard filters ---
        name = (criteria.name or "").casefold()
        if name:
            mask &= df["name_folded"].str.contains(name, regex=False)

        if criteria.rating is not None:
            mask &= df["rating"] >= criteria.rating

        if criteria.distance is not None:
            mask &= df["distance"] <= criteria.distance

        if criteria.price is not None:
            mask &= df["price"] <= criteria.price

        cuisine = (criteria.cuisine or "").casefold()
        if cuisine:
            mask &= df["cuisine_folded"].str.contains(cuisine, regex=False)

        candidates = df.loc[mask]
        logger.debug("Search %s matched %d of %d restaurants", criteria, len(candidates), len(df))

        top = candidates.sort_values(
            RANKING_COLUMNS, ascending=RANKING_ASCENDING, kind="stable"
        ).head(MAX_RESULTS)

        return [self._catalog[i] for i in top.index]
