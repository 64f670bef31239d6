from __future__ import annotations

import logging
from pathlib import Path

import pandas as pd

from ..search.constants import DISTANCE_RANGE, PRICE_RANGE, RATING_RANGE, UNKNOWN_CUISINE
from ..search.models import Restaurant
from .config import DEFAULT_CATALOG_CONFIG, CatalogConfig

logger = logging.getLogger(__name__)

CUISINE_COLUMNS: list[str] = ["id", "name"]
RESTAURANT_COLUMNS: list[str] = ["name", "rating", "distance", "price", "cuisine_id"]

_NUMERIC_DOMAINS: dict[str, tuple[int, int]] = {
    "rating": RATING_RANGE,
    "distance": DISTANCE_RANGE,
    "price": PRICE_RANGE,
}
_INTEGER_PATTERN = r"[+-]?\d+"


def _read_table(path: Path, columns: list[str]) -> pd.DataFrame:
    """
    Read a headed CSV file and name its leading columns positionally.

    Only the first ``len(columns)`` fields of each line are kept, so trailing
    commas and extra fields are ignored. Every cell is kept as trimmed text;
    blank cells become NaN.
    """
    try:
        width = len(pd.read_csv(path, nrows=0).columns)
        df = pd.read_csv(
            path,
            dtype=str,
            keep_default_na=False,
            na_values=[""],
            skipinitialspace=True,
            index_col=False,
            usecols=list(range(min(width, len(columns)))),
        )
    except pd.errors.EmptyDataError:
        logger.warning("%s is empty", path)
        return pd.DataFrame(columns=columns)

    # Pad short tables so every expected column exists (and is missing)
    for extra in range(df.shape[1], len(columns)):
        df[f"_missing_{extra}"] = pd.NA
    df.columns = columns

    for column in columns:
        df[column] = df[column].str.strip()
    return df


def _complete_rows(df: pd.DataFrame) -> pd.Series:
    return df.notna().all(axis=1) & (df != "").all(axis=1)


def load_cuisines(path: Path) -> dict[str, str]:
    """Return a mapping of cuisine id to display name."""
    logger.info("Loading cuisines from %s", path)
    df = _read_table(path, CUISINE_COLUMNS)

    valid = df.loc[_complete_rows(df)].drop_duplicates(subset="id", keep="first")
    skipped = len(df) - len(valid)
    if skipped:
        logger.warning("Skipped %d malformed or duplicate cuisine rows in %s", skipped, path)
    return dict(zip(valid["id"], valid["name"]))


def load_restaurants(path: Path, cuisines: dict[str, str]) -> tuple[Restaurant, ...]:
    """
    Load restaurant rows and resolve their cuisine ids.

    A row is dropped when any field is missing, when rating, distance or
    price is not a whole number, or when one of them falls outside its
    domain range. Unknown cuisine ids resolve to ``"Other"``.
    """
    logger.info("Loading restaurants from %s", path)
    df = _read_table(path, RESTAURANT_COLUMNS)

    valid = _complete_rows(df)
    for column, (low, high) in _NUMERIC_DOMAINS.items():
        is_integer = df[column].str.fullmatch(_INTEGER_PATTERN, na=False).astype(bool)
        values = pd.to_numeric(df[column].where(is_integer), errors="coerce")
        valid &= is_integer & values.between(low, high)

    kept = df.loc[valid]
    skipped = len(df) - len(kept)
    if skipped:
        logger.warning("Skipped %d malformed restaurant rows in %s", skipped, path)

    restaurants = tuple(
        Restaurant(
            name=row.name,
            rating=int(row.rating),
            distance=int(row.distance),
            price=int(row.price),
            cuisine=cuisines.get(row.cuisine_id, UNKNOWN_CUISINE),
        )
        for row in kept.itertuples(index=False)
    )
    logger.info("Loaded %d restaurants.", len(restaurants))
    return restaurants


def load_catalog(config: CatalogConfig = DEFAULT_CATALOG_CONFIG) -> tuple[Restaurant, ...]:
    """Load the cuisine table, then the restaurant table that references it."""
    cuisines = load_cuisines(config.cuisines_path)
    return load_restaurants(config.restaurants_path, cuisines)
