"""Criteria filtering, text search and criteria actions."""

from pg_finder.filters.actions import (
    ClearOne,
    CriteriaAction,
    Reset,
    SetLocation,
    SetMaxPrice,
    SetTenantType,
    ToggleService,
    action_for,
    reduce_criteria,
    toggle_service,
)
from pg_finder.filters.criteria import CriteriaFilter, apply_criteria
from pg_finder.filters.search import SearchReconciler, matches_search_text, resolve

__all__ = [
    "ClearOne",
    "CriteriaAction",
    "CriteriaFilter",
    "Reset",
    "SearchReconciler",
    "SetLocation",
    "SetMaxPrice",
    "SetTenantType",
    "ToggleService",
    "action_for",
    "apply_criteria",
    "matches_search_text",
    "reduce_criteria",
    "resolve",
    "toggle_service",
]
