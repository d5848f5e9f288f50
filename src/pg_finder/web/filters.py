"""FastAPI dependency that parses listing filter query parameters."""

from typing import Annotated

from fastapi import Depends, Query

from pg_finder.models import FilterCriteria


def parse_criteria(
    location: str | None = None,
    max_price: str | None = None,
    tenant_type: str | None = None,
    service: list[str] = Query(default=[]),
) -> FilterCriteria:
    """Parse query params into FilterCriteria.

    Values are taken as raw strings and coerced by FilterCriteria, so an
    invalid ``max_price`` or unknown ``tenant_type`` means "no constraint"
    rather than a 422.
    """
    return FilterCriteria.model_validate(
        {
            "location": location,
            "max_price": max_price,
            "tenant_type": tenant_type,
            "services": service,
        }
    )


CriteriaDep = Annotated[FilterCriteria, Depends(parse_criteria)]
