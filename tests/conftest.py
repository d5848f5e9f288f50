"""Shared pytest fixtures."""

import os
import sys
from typing import Any

import pytest
from hypothesis import HealthCheck, settings

from pg_finder.config import Settings
from pg_finder.models import FilterCriteria, Property, TenantType


def pytest_configure(config: pytest.Config) -> None:
    """Force line-buffered stdout when piped."""
    if hasattr(sys.stdout, "reconfigure") and not sys.stdout.isatty():
        sys.stdout.reconfigure(line_buffering=True)
    if hasattr(sys.stderr, "reconfigure") and not sys.stderr.isatty():
        sys.stderr.reconfigure(line_buffering=True)


# Hypothesis settings profiles for different environments
settings.register_profile("fast", max_examples=25)
settings.register_profile(
    "ci",
    max_examples=200,
    suppress_health_check=[HealthCheck.too_slow],
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "fast"))


@pytest.fixture(autouse=True)
def _isolate_settings_from_dotenv(monkeypatch: pytest.MonkeyPatch) -> None:
    """Prevent the local .env file from leaking into test Settings instances."""
    monkeypatch.setattr(
        Settings,
        "model_config",
        {**Settings.model_config, "env_file": None},
    )


@pytest.fixture
def sunrise() -> Property:
    return Property(
        id="p1",
        title="Sunrise PG",
        location="Baner",
        price=8000,
        tenant_type=TenantType.STUDENT,
        services=("Wifi", "AC"),
        description="Walking distance to Baner road bus stop.",
    )


@pytest.fixture
def moonlight() -> Property:
    return Property(
        id="p2",
        title="Moonlight PG",
        location="Aundh",
        price=12000,
        tenant_type=TenantType.FAMILY,
        services=("Parking",),
    )


@pytest.fixture
def pair(sunrise: Property, moonlight: Property) -> list[Property]:
    """The two-listing example set used throughout the engine tests."""
    return [sunrise, moonlight]


@pytest.fixture
def sample_properties(pair: list[Property]) -> list[Property]:
    """A wider snapshot covering missing optional fields."""
    return [
        *pair,
        Property(
            id="p3",
            title="Greenview Residency",
            location="Balewadi High Street",
            price=15000,
            tenant_type=TenantType.WORKING_PROFESSIONAL,
            services=("Air Conditioning", "Gym", "Laundry"),
            description="Fully furnished rooms near the stadium.",
        ),
        Property(
            id="p4",
            title="Budget Stay",
            location="Kondhwa",
            price=4500,
        ),
        Property(
            id="p5",
            title="Girls Hostel Akurdi",
            location="Akurdi",
            price=6000,
            tenant_type=TenantType.GIRLS,
            services=("Food", "Security", "Wifi"),
            description=None,
        ),
    ]


@pytest.fixture
def raw_listing() -> dict[str, Any]:
    """A listing as the backend returns it."""
    return {
        "_id": "65f1c0ffee",
        "title": "Sunrise PG",
        "location": "Baner",
        "price": 8000,
        "tenantType": "Student",
        "services": ["Wifi", "AC"],
        "description": "Walking distance to Baner road bus stop.",
        "contact": "9876543210",
        "images": ["/uploads/sunrise-1.jpg", "/uploads/sunrise-2.jpg"],
        "rentingOption": "Shared room",
    }


@pytest.fixture
def empty_criteria() -> FilterCriteria:
    return FilterCriteria()
