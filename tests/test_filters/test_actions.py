"""Tests for criteria actions and the reducer."""

import pytest

from pg_finder.filters.actions import (
    ClearOne,
    Reset,
    SetLocation,
    SetMaxPrice,
    SetTenantType,
    ToggleService,
    action_for,
    reduce_criteria,
    toggle_service,
)
from pg_finder.models import CriterionKind, FilterCriteria, TenantType


@pytest.fixture
def full_criteria() -> FilterCriteria:
    return FilterCriteria(
        location="Baner",
        max_price=10000,
        tenant_type=TenantType.STUDENT,
        services=("Wifi", "AC"),
    )


class TestToggleService:
    def test_adds_missing_label(self, empty_criteria: FilterCriteria) -> None:
        assert toggle_service(empty_criteria, "Wifi").services == ("Wifi",)

    def test_removes_present_label(self, full_criteria: FilterCriteria) -> None:
        assert toggle_service(full_criteria, "Wifi").services == ("AC",)

    def test_appends_in_selection_order(self, empty_criteria: FilterCriteria) -> None:
        criteria = toggle_service(toggle_service(empty_criteria, "Gym"), "Food")
        assert criteria.services == ("Gym", "Food")

    def test_self_inverse(self, full_criteria: FilterCriteria) -> None:
        assert toggle_service(toggle_service(full_criteria, "Parking"), "Parking") == full_criteria

    def test_self_inverse_for_selected_label(self, full_criteria: FilterCriteria) -> None:
        twice = toggle_service(toggle_service(full_criteria, "Wifi"), "Wifi")
        assert twice == full_criteria
        assert twice.services == ("AC", "Wifi")

    def test_does_not_mutate_original(self, full_criteria: FilterCriteria) -> None:
        toggle_service(full_criteria, "Wifi")
        assert full_criteria.services == ("Wifi", "AC")


class TestReduceCriteria:
    def test_set_location(self, empty_criteria: FilterCriteria) -> None:
        assert reduce_criteria(empty_criteria, SetLocation("Aundh")).location == "Aundh"

    def test_set_location_keeps_other_fields(self, full_criteria: FilterCriteria) -> None:
        result = reduce_criteria(full_criteria, SetLocation("Aundh"))
        assert result.max_price == 10000
        assert result.tenant_type is TenantType.STUDENT
        assert result.services == ("Wifi", "AC")

    def test_set_max_price_from_form_string(self, empty_criteria: FilterCriteria) -> None:
        assert reduce_criteria(empty_criteria, SetMaxPrice("15000")).max_price == 15000.0

    def test_set_max_price_blank_clears(self, full_criteria: FilterCriteria) -> None:
        assert reduce_criteria(full_criteria, SetMaxPrice("")).max_price is None

    def test_set_max_price_garbage_clears(self, full_criteria: FilterCriteria) -> None:
        assert reduce_criteria(full_criteria, SetMaxPrice("lots")).max_price is None

    def test_set_tenant_type(self, empty_criteria: FilterCriteria) -> None:
        result = reduce_criteria(empty_criteria, SetTenantType("Working Professional"))
        assert result.tenant_type is TenantType.WORKING_PROFESSIONAL

    def test_set_tenant_type_empty_clears(self, full_criteria: FilterCriteria) -> None:
        assert reduce_criteria(full_criteria, SetTenantType("")).tenant_type is None

    def test_toggle_service(self, full_criteria: FilterCriteria) -> None:
        assert reduce_criteria(full_criteria, ToggleService("AC")).services == ("Wifi",)

    def test_toggle_blank_service_is_noop(self, full_criteria: FilterCriteria) -> None:
        assert reduce_criteria(full_criteria, ToggleService("  ")) == full_criteria

    def test_reset(self, full_criteria: FilterCriteria) -> None:
        assert reduce_criteria(full_criteria, Reset()) == FilterCriteria()

    @pytest.mark.parametrize(
        ("kind", "field", "cleared"),
        [
            (CriterionKind.LOCATION, "location", ""),
            (CriterionKind.MAX_PRICE, "max_price", None),
            (CriterionKind.TENANT_TYPE, "tenant_type", None),
        ],
    )
    def test_clear_one_scalar(
        self, full_criteria: FilterCriteria, kind: CriterionKind, field: str, cleared: object
    ) -> None:
        result = reduce_criteria(full_criteria, ClearOne(kind))
        assert getattr(result, field) == cleared
        assert result.services == full_criteria.services

    def test_clear_one_service(self, full_criteria: FilterCriteria) -> None:
        result = reduce_criteria(full_criteria, ClearOne(CriterionKind.SERVICES, "Wifi"))
        assert result.services == ("AC",)
        assert result.location == "Baner"

    def test_clear_unselected_service_does_not_select_it(
        self, full_criteria: FilterCriteria
    ) -> None:
        result = reduce_criteria(full_criteria, ClearOne(CriterionKind.SERVICES, "Gym"))
        assert result == full_criteria

    def test_clear_service_without_value_is_noop(self, full_criteria: FilterCriteria) -> None:
        assert reduce_criteria(full_criteria, ClearOne(CriterionKind.SERVICES)) == full_criteria

    def test_input_is_not_mutated(self, full_criteria: FilterCriteria) -> None:
        reduce_criteria(full_criteria, Reset())
        assert full_criteria.location == "Baner"


class TestActionFor:
    def test_services_route_to_toggle(self) -> None:
        assert action_for("services", "Wifi") == ToggleService("Wifi")

    def test_scalar_kinds_route_to_setters(self) -> None:
        assert action_for(CriterionKind.LOCATION, "Baner") == SetLocation("Baner")
        assert action_for("max_price", "5000") == SetMaxPrice("5000")
        assert action_for("tenant_type", "Boys") == SetTenantType("Boys")

    def test_none_values(self) -> None:
        assert action_for("location", None) == SetLocation("")
        assert action_for("max_price", None) == SetMaxPrice(None)
        assert action_for("tenant_type", None) == SetTenantType(None)

    def test_unknown_kind_rejected(self) -> None:
        with pytest.raises(ValueError):
            action_for("bedrooms", 2)
