"""Criteria actions and the reducer that applies them.

Every change to FilterCriteria goes through ``reduce_criteria`` with one of a
closed set of action types. Criteria are immutable; the reducer returns a new
value and leaves the old one untouched.
"""

from dataclasses import dataclass
from typing import assert_never

from pg_finder.models import CriterionKind, FilterCriteria, TenantType


@dataclass(frozen=True)
class SetLocation:
    location: str


@dataclass(frozen=True)
class SetMaxPrice:
    # Raw form value; anything non-numeric clears the bound.
    max_price: float | str | None


@dataclass(frozen=True)
class SetTenantType:
    tenant_type: TenantType | str | None


@dataclass(frozen=True)
class ToggleService:
    label: str


@dataclass(frozen=True)
class Reset:
    pass


@dataclass(frozen=True)
class ClearOne:
    """Remove a single active filter chip. ``value`` names the service for SERVICES."""

    kind: CriterionKind
    value: str | None = None


CriteriaAction = SetLocation | SetMaxPrice | SetTenantType | ToggleService | Reset | ClearOne


def toggle_service(criteria: FilterCriteria, label: str) -> FilterCriteria:
    """Remove ``label`` if selected, otherwise append it."""
    if label in criteria.services:
        services = tuple(s for s in criteria.services if s != label)
    else:
        services = (*criteria.services, label)
    return criteria.model_copy(update={"services": services})


def _clear_one(criteria: FilterCriteria, kind: CriterionKind, value: str | None) -> FilterCriteria:
    if kind is CriterionKind.LOCATION:
        return criteria.model_copy(update={"location": ""})
    if kind is CriterionKind.MAX_PRICE:
        return criteria.model_copy(update={"max_price": None})
    if kind is CriterionKind.TENANT_TYPE:
        return criteria.model_copy(update={"tenant_type": None})
    if kind is CriterionKind.SERVICES:
        # Clearing a service that is not selected must not select it.
        if value is None or value not in criteria.services:
            return criteria
        return toggle_service(criteria, value)
    assert_never(kind)


def reduce_criteria(criteria: FilterCriteria, action: CriteriaAction) -> FilterCriteria:
    """Apply ``action`` to ``criteria`` and return the resulting criteria.

    Raw values (location text, price strings, tenant labels) are coerced with
    the same rules as FilterCriteria validation, so invalid input degrades to
    "no constraint" rather than raising.
    """
    if isinstance(action, SetLocation):
        return FilterCriteria.model_validate(
            {**criteria.model_dump(), "location": action.location}
        )
    if isinstance(action, SetMaxPrice):
        return FilterCriteria.model_validate(
            {**criteria.model_dump(), "max_price": action.max_price}
        )
    if isinstance(action, SetTenantType):
        return FilterCriteria.model_validate(
            {**criteria.model_dump(), "tenant_type": action.tenant_type}
        )
    if isinstance(action, ToggleService):
        if not action.label.strip():
            return criteria
        return toggle_service(criteria, action.label)
    if isinstance(action, Reset):
        return FilterCriteria()
    if isinstance(action, ClearOne):
        return _clear_one(criteria, CriterionKind(action.kind), action.value)
    assert_never(action)


def action_for(kind: CriterionKind | str, value: object) -> CriteriaAction:
    """Build the action a form control emits when it changes.

    Services are multi-select checkboxes, so a services change toggles the
    given label rather than replacing the selection.
    """
    kind = CriterionKind(kind)
    if kind is CriterionKind.LOCATION:
        return SetLocation("" if value is None else str(value))
    if kind is CriterionKind.MAX_PRICE:
        return SetMaxPrice(value if isinstance(value, int | float | str) else None)
    if kind is CriterionKind.TENANT_TYPE:
        return SetTenantType(value if isinstance(value, str) else None)
    if kind is CriterionKind.SERVICES:
        return ToggleService("" if value is None else str(value))
    assert_never(kind)
