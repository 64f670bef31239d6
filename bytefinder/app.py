from __future__ import annotations

import logging

from fastapi import FastAPI, HTTPException, Request

from .catalog.config import DEFAULT_CATALOG_CONFIG, CatalogConfig
from .search.constants import DISTANCE_RANGE, MAX_RESULTS, PRICE_RANGE, RATING_RANGE
from .search.engine import InvalidArgument, RestaurantSearch
from .search.models import CriteriaRange, MetadataResponse, SearchCriteria, SearchResponse

logger = logging.getLogger(__name__)


def _get_engine(request: Request) -> RestaurantSearch:
    return request.app.state.engine


def create_app(
    engine: RestaurantSearch | None = None,
    config: CatalogConfig = DEFAULT_CATALOG_CONFIG,
) -> FastAPI:
    """Build the API around ``engine``, loading one from ``config`` when not given."""
    if engine is None:
        engine = RestaurantSearch.from_config(config)

    app = FastAPI(title="ByteFinder Restaurant Search API", version="1.0.0")
    app.state.engine = engine

    # ── Public endpoints ─────────────────────────────────────────────────

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/metadata", response_model=MetadataResponse)
    def metadata(request: Request) -> MetadataResponse:
        searcher = _get_engine(request)
        return MetadataResponse(
            cuisines=searcher.cuisines(),
            total_restaurants=len(searcher),
            max_results=MAX_RESULTS,
            ranges={
                "rating": CriteriaRange(minimum=RATING_RANGE[0], maximum=RATING_RANGE[1]),
                "distance": CriteriaRange(minimum=DISTANCE_RANGE[0], maximum=DISTANCE_RANGE[1]),
                "price": CriteriaRange(minimum=PRICE_RANGE[0], maximum=PRICE_RANGE[1]),
            },
        )

    # ── Search ───────────────────────────────────────────────────────────

    @app.post("/search", response_model=SearchResponse)
    def search(body: SearchCriteria, request: Request) -> SearchResponse:
        try:
            results = _get_engine(request).search(body)
        except InvalidArgument as exc:
            logger.info("Rejected search criteria: %s", exc.message)
            raise HTTPException(
                status_code=422,
                detail={"field": exc.field, "message": exc.message},
            ) from exc
        return SearchResponse(results=results, count=len(results))

    return app


app = create_app()
