"""JSON API routes for browsing listings."""

from typing import Any

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from pg_finder.client import PropertyFeed
from pg_finder.config import Settings
from pg_finder.constants import PRICE_RANGES, TENANT_TYPES
from pg_finder.filters.search import SearchReconciler
from pg_finder.logging import get_logger
from pg_finder.models import Property
from pg_finder.session import ListingSession
from pg_finder.web.filters import CriteriaDep

logger = get_logger(__name__)

router = APIRouter()

_reconciler = SearchReconciler()


def _get_session(request: Request) -> ListingSession:
    return request.app.state.session  # type: ignore[no-any-return]


def _get_settings(request: Request) -> Settings:
    return request.app.state.settings  # type: ignore[no-any-return]


def _get_feed(request: Request) -> PropertyFeed:
    return request.app.state.feed  # type: ignore[no-any-return]


def _serialize(prop: Property) -> dict[str, Any]:
    return prop.model_dump(mode="json", by_alias=True)


@router.get("/health")
async def health_check() -> JSONResponse:
    return JSONResponse({"status": "ok"})


@router.get("/api/listings")
async def list_listings(
    request: Request,
    criteria: CriteriaDep,
    search: str = "",
) -> JSONResponse:
    """Displayed subset for the given search text and criteria.

    Stateless: the result depends only on the query and the current
    snapshot, so repeated identical requests return identical bodies.
    """
    session = _get_session(request)
    results = _reconciler.resolve(session.properties, search, criteria)
    return JSONResponse(
        {
            "results": [_serialize(p) for p in results],
            "count": len(results),
            "search": search,
            "search_active": bool(search.strip()),
            "criteria": criteria.model_dump(mode="json"),
            "active_filters": criteria.active_filter_chips(),
        }
    )


@router.get("/api/options")
async def filter_options(request: Request) -> JSONResponse:
    """Choices offered by the filter form."""
    settings = _get_settings(request)
    return JSONResponse(
        {
            "locations": settings.get_locations(),
            "tenant_types": list(TENANT_TYPES),
            "services": settings.get_services(),
            "price_ranges": [{"label": label, "value": value} for label, value in PRICE_RANGES],
        }
    )


@router.post("/api/refresh")
async def refresh_listings(request: Request) -> JSONResponse:
    """Re-fetch the snapshot. A failed fetch keeps the previous one."""
    session = _get_session(request)
    await session.refresh(_get_feed(request))
    logger.info("listings_refreshed", total_properties=len(session.properties))
    return JSONResponse(
        {"count": len(session.properties), "version": session.snapshot_version}
    )
