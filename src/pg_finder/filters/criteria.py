"""Structured criteria filtering."""

from collections.abc import Sequence

from pg_finder.logging import get_logger
from pg_finder.models import FilterCriteria, Property, TenantType

logger = get_logger(__name__)


def matches_location(prop: Property, location: str) -> bool:
    """Case-insensitive substring match on the listing's location."""
    if not location:
        return True
    return location.lower() in prop.location.lower()


def within_max_price(prop: Property, max_price: float | None) -> bool:
    if max_price is None:
        return True
    return prop.price <= max_price


def matches_tenant_type(prop: Property, tenant_type: TenantType | None) -> bool:
    """Exact match; a listing without a tenant type fails an active criterion."""
    if tenant_type is None:
        return True
    return prop.tenant_type == tenant_type


def has_services(prop: Property, services: Sequence[str]) -> bool:
    """Check every requested service is offered.

    A requested label is satisfied when any of the listing's services
    contains it, ignoring case ("wifi" matches "Free WiFi"). Listings
    with no services fail as soon as any service is requested.
    """
    if not services:
        return True
    if not prop.services:
        return False
    offered = [s.lower() for s in prop.services]
    return all(any(wanted.lower() in label for label in offered) for wanted in services)


class CriteriaFilter:
    """Filter properties by structured criteria (location, price, tenant type, services)."""

    def __init__(self, criteria: FilterCriteria) -> None:
        """Initialize the criteria filter.

        Args:
            criteria: Criteria to filter by.
        """
        self.criteria = criteria

    def matches(self, prop: Property) -> bool:
        """Check a single property against every active criterion."""
        c = self.criteria
        return (
            matches_location(prop, c.location)
            and within_max_price(prop, c.max_price)
            and matches_tenant_type(prop, c.tenant_type)
            and has_services(prop, c.services)
        )

    def filter_properties(self, properties: Sequence[Property]) -> list[Property]:
        """Filter properties by criteria.

        Args:
            properties: Properties to filter. Not modified.

        Returns:
            Matching properties, in input order.
        """
        if not self.criteria.is_active:
            return list(properties)

        matching = [p for p in properties if self.matches(p)]

        logger.debug(
            "criteria_filter_complete",
            total_properties=len(properties),
            matching=len(matching),
            location=self.criteria.location or None,
            max_price=self.criteria.max_price,
            tenant_type=self.criteria.tenant_type,
            services=list(self.criteria.services),
        )

        return matching


def apply_criteria(properties: Sequence[Property], criteria: FilterCriteria) -> list[Property]:
    """Return the properties satisfying all of ``criteria``."""
    return CriteriaFilter(criteria).filter_properties(properties)
