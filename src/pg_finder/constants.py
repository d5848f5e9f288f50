"""Option catalogues offered by the filter form."""

from typing import Final

from pg_finder.models import TenantType

DEFAULT_LOCATIONS: Final = ("Akurdi", "Aundh", "Balewadi", "Baner", "Dhankawadi", "Kondhwa")

DEFAULT_SERVICES: Final = ("Wifi", "AC", "Laundry", "Parking", "Gym", "Food", "Security", "Cleaning")

TENANT_TYPES: Final = tuple(t.value for t in TenantType)

# (label, max_price); None means no price constraint.
PRICE_RANGES: Final[tuple[tuple[str, int | None], ...]] = (
    ("Under ₹5,000", 5000),
    ("Under ₹10,000", 10000),
    ("Under ₹15,000", 15000),
    ("Under ₹20,000", 20000),
    ("Any Price", None),
)
