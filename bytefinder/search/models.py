from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .constants import DISTANCE_RANGE, PRICE_RANGE, RATING_RANGE


class Restaurant(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    rating: int = Field(ge=RATING_RANGE[0], le=RATING_RANGE[1])
    distance: int = Field(ge=DISTANCE_RANGE[0], le=DISTANCE_RANGE[1])
    price: int = Field(ge=PRICE_RANGE[0], le=PRICE_RANGE[1])
    cuisine: str


class SearchCriteria(BaseModel):
    """Optional search criteria. ``None`` (or an empty string) means no constraint."""

    model_config = ConfigDict(frozen=True)

    name: str | None = Field(
        default=None, description="Partial, case-insensitive restaurant name"
    )
    rating: int | None = Field(
        default=None, strict=True, description="Minimum customer rating (1-5)"
    )
    distance: int | None = Field(
        default=None, strict=True, description="Maximum distance in miles (1-10)"
    )
    price: int | None = Field(
        default=None, strict=True, description="Maximum price per person (10-50)"
    )
    cuisine: str | None = Field(
        default=None, description="Partial, case-insensitive cuisine name"
    )


class SearchResponse(BaseModel):
    results: list[Restaurant]
    count: int


class CriteriaRange(BaseModel):
    minimum: int
    maximum: int


class MetadataResponse(BaseModel):
    cuisines: list[str]
    total_restaurants: int
    max_results: int
    ranges: dict[str, CriteriaRange]
