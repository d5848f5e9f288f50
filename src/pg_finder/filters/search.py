"""Free-text search and its precedence over structured criteria."""

from collections.abc import Sequence

from pg_finder.filters.criteria import apply_criteria
from pg_finder.logging import get_logger
from pg_finder.models import FilterCriteria, Property

logger = get_logger(__name__)


def matches_search_text(prop: Property, search_text: str) -> bool:
    """Case-insensitive substring match against title, location and description."""
    needle = search_text.lower()
    return (
        needle in prop.title.lower()
        or needle in prop.location.lower()
        or (prop.description is not None and needle in prop.description.lower())
    )


class SearchReconciler:
    """Decide between text search and criteria filtering.

    Non-blank search text takes absolute precedence: criteria are ignored
    entirely while it is set. The two views are never combined.
    """

    def resolve(
        self,
        properties: Sequence[Property],
        search_text: str,
        criteria: FilterCriteria,
    ) -> list[Property]:
        """Compute the displayed subset.

        Args:
            properties: Full property snapshot. Not modified.
            search_text: Raw search box contents.
            criteria: Current structured criteria.

        Returns:
            Subsequence of ``properties`` to display.
        """
        if not search_text.strip():
            return apply_criteria(properties, criteria)

        results = [p for p in properties if matches_search_text(p, search_text)]
        logger.debug(
            "search_resolved",
            search_text=search_text,
            total_properties=len(properties),
            matching=len(results),
            criteria_ignored=criteria.is_active,
        )
        return results


def resolve(
    properties: Sequence[Property], search_text: str, criteria: FilterCriteria
) -> list[Property]:
    """Module-level shortcut for ``SearchReconciler().resolve``."""
    return SearchReconciler().resolve(properties, search_text, criteria)
