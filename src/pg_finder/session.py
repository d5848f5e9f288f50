"""Listing session: owns the snapshot, criteria and search text."""

from collections.abc import Iterable
from typing import TYPE_CHECKING

from pg_finder.filters.actions import (
    ClearOne,
    CriteriaAction,
    Reset,
    ToggleService,
    action_for,
    reduce_criteria,
)
from pg_finder.filters.search import SearchReconciler
from pg_finder.logging import get_logger
from pg_finder.models import CriterionKind, FilterCriteria, Property

if TYPE_CHECKING:
    from pg_finder.client import PropertyFeed

logger = get_logger(__name__)


class ListingSession:
    """State container for one browsing session.

    Every mutation is immediately followed by re-deriving the displayed
    subset, so ``displayed`` and ``result_count`` always reflect the current
    criteria and search text. Derivation is memoised on
    ``(search_text, criteria, snapshot_version)``; repeated reads with
    unchanged inputs reuse the previous result.
    """

    def __init__(self, properties: Iterable[Property] = ()) -> None:
        self._reconciler = SearchReconciler()
        self._properties: tuple[Property, ...] = ()
        self._version = 0
        self._criteria = FilterCriteria()
        self._search_text = ""
        self._cache_key: tuple[str, FilterCriteria, int] | None = None
        self._displayed: tuple[Property, ...] = ()
        self.load(properties)

    # --- read side ---

    @property
    def properties(self) -> tuple[Property, ...]:
        """The full snapshot, in API order."""
        return self._properties

    @property
    def snapshot_version(self) -> int:
        return self._version

    @property
    def criteria(self) -> FilterCriteria:
        return self._criteria

    @property
    def search_text(self) -> str:
        return self._search_text

    @property
    def displayed(self) -> tuple[Property, ...]:
        return self._displayed

    @property
    def result_count(self) -> int:
        return len(self._displayed)

    @property
    def search_active(self) -> bool:
        """Whether search text currently overrides the criteria."""
        return bool(self._search_text.strip())

    def active_filter_chips(self) -> list[dict[str, str]]:
        return self._criteria.active_filter_chips()

    # --- snapshot ---

    def load(self, properties: Iterable[Property]) -> None:
        """Replace the snapshot with a freshly fetched property list."""
        self._properties = tuple(properties)
        self._version += 1
        self._rederive()
        logger.info(
            "snapshot_loaded",
            version=self._version,
            total_properties=len(self._properties),
            displayed=self.result_count,
        )

    async def refresh(self, feed: "PropertyFeed") -> None:
        """Fetch a new snapshot. On fetch failure the feed returns its last good snapshot."""
        self.load(await feed.fetch())

    # --- mutations ---

    def set_search_text(self, text: str) -> None:
        self._search_text = text
        self._rederive()

    def dispatch(self, action: CriteriaAction) -> FilterCriteria:
        """Apply a criteria action and re-derive the displayed subset."""
        if isinstance(action, Reset):
            # After reset the full snapshot is displayed, so search is cleared too.
            self._search_text = ""
        self._criteria = reduce_criteria(self._criteria, action)
        self._rederive()
        return self._criteria

    def set_criterion(self, kind: CriterionKind | str, value: object) -> FilterCriteria:
        """Form-control entry point. A ``services`` change toggles ``value``."""
        return self.dispatch(action_for(kind, value))

    def toggle_service(self, label: str) -> FilterCriteria:
        return self.dispatch(ToggleService(label))

    def clear_one(self, kind: CriterionKind | str, value: str | None = None) -> FilterCriteria:
        return self.dispatch(ClearOne(CriterionKind(kind), value))

    def reset(self) -> FilterCriteria:
        return self.dispatch(Reset())

    # --- derivation ---

    def _rederive(self) -> None:
        key = (self._search_text, self._criteria, self._version)
        if key == self._cache_key:
            return
        self._displayed = tuple(
            self._reconciler.resolve(self._properties, self._search_text, self._criteria)
        )
        self._cache_key = key
