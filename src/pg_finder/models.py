"""Pydantic models for listings and filter criteria."""

import math
from enum import StrEnum
from typing import Final

from pydantic import BaseModel, ConfigDict, Field, field_validator


class TenantType(StrEnum):
    """Tenant categories a listing can be let to.

    Values match the labels used by the listings API, so comparison is
    exact and case-sensitive.
    """

    FAMILY = "Family"
    BACHELOR = "Bachelor"
    STUDENT = "Student"
    WORKING_PROFESSIONAL = "Working Professional"
    GIRLS = "Girls"
    BOYS = "Boys"


class CriterionKind(StrEnum):
    """Structured criteria fields that can be set or cleared individually."""

    LOCATION = "location"
    MAX_PRICE = "max_price"
    TENANT_TYPE = "tenant_type"
    SERVICES = "services"


_TENANT_TYPE_VALUES: Final = frozenset(t.value for t in TenantType)


def coerce_tenant_type(value: object) -> TenantType | None:
    """Map a raw value onto TenantType, returning None for blank or unknown values."""
    if isinstance(value, TenantType):
        return value
    if not isinstance(value, str) or value not in _TENANT_TYPE_VALUES:
        return None
    return TenantType(value)


def parse_price(value: object) -> float | None:
    """Parse a price bound, returning None for anything that is not a finite non-negative number."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int | float):
        parsed = float(value)
    else:
        text = str(value).strip().replace(",", "")
        if not text:
            return None
        try:
            parsed = float(text)
        except ValueError:
            return None
    if not math.isfinite(parsed) or parsed < 0:
        return None
    return parsed


def format_price(value: float) -> str:
    """Format a rupee amount with thousands separators, dropping a zero fraction."""
    if value == int(value):
        return f"₹{int(value):,}"
    return f"₹{value:,.2f}"


class Property(BaseModel):
    """A rental listing as returned by the listings API."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(alias="_id", min_length=1, description="Stable listing identifier")
    title: str
    location: str
    price: float = Field(ge=0, description="Monthly rent in INR")
    tenant_type: TenantType | None = Field(default=None, alias="tenantType")
    services: tuple[str, ...] | None = None
    description: str | None = None
    contact: str | None = None
    images: tuple[str, ...] = ()
    renting_option: str | None = Field(default=None, alias="rentingOption")

    @field_validator("id", mode="before")
    @classmethod
    def stringify_id(cls, v: object) -> object:
        """Accept numeric identifiers from the API."""
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator("tenant_type", mode="before")
    @classmethod
    def normalize_tenant_type(cls, v: object) -> TenantType | None:
        """Unknown tenant types are treated as absent."""
        return coerce_tenant_type(v)

    @field_validator("images", mode="before")
    @classmethod
    def default_images(cls, v: object) -> object:
        return () if v is None else v

    @property
    def thumbnail(self) -> str | None:
        """First image reference, if any."""
        return self.images[0] if self.images else None


class FilterCriteria(BaseModel):
    """Structured filter criteria.

    All fields default to "no constraint". Validators coerce raw form values
    to the correct type and silently discard invalid ones, so a criteria
    object can always be applied without raising.
    """

    model_config = ConfigDict(frozen=True)

    location: str = ""
    max_price: float | None = None
    tenant_type: TenantType | None = None
    services: tuple[str, ...] = ()

    @field_validator("location", mode="before")
    @classmethod
    def clean_location(cls, v: object) -> str:
        if v is None:
            return ""
        return str(v).strip()

    @field_validator("max_price", mode="before")
    @classmethod
    def coerce_max_price(cls, v: object) -> float | None:
        return parse_price(v)

    @field_validator("tenant_type", mode="before")
    @classmethod
    def validate_tenant_type(cls, v: object) -> TenantType | None:
        return coerce_tenant_type(v)

    @field_validator("services", mode="before")
    @classmethod
    def dedupe_services(cls, v: object) -> tuple[str, ...]:
        """Keep first occurrence of each non-blank label, in order."""
        if not v:
            return ()
        if isinstance(v, str):
            v = [v]
        if not isinstance(v, list | tuple):
            return ()
        seen: list[str] = []
        for label in v:
            if isinstance(label, str) and label.strip() and label not in seen:
                seen.append(label)
        return tuple(seen)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FilterCriteria):
            return NotImplemented
        return _criteria_key(self) == _criteria_key(other)

    def __hash__(self) -> int:
        return hash(_criteria_key(self))

    @property
    def is_active(self) -> bool:
        """Whether any criterion differs from its default."""
        return bool(
            self.location
            or self.max_price is not None
            or self.tenant_type is not None
            or self.services
        )

    def active_filter_chips(self) -> list[dict[str, str]]:
        """Build filter chip descriptors for the active filters summary."""
        chips: list[dict[str, str]] = []
        if self.location:
            chips.append({"key": CriterionKind.LOCATION, "label": f"Location: {self.location}"})
        if self.max_price is not None:
            chips.append(
                {"key": CriterionKind.MAX_PRICE, "label": f"Max Price: {format_price(self.max_price)}"}
            )
        if self.tenant_type is not None:
            chips.append(
                {"key": CriterionKind.TENANT_TYPE, "label": f"Tenant: {self.tenant_type.value}"}
            )
        for service in self.services:
            chips.append({"key": CriterionKind.SERVICES, "label": service, "value": service})
        return chips


def _criteria_key(criteria: FilterCriteria) -> tuple[object, ...]:
    # Selection order only affects chip display, never which listings match.
    return (
        criteria.location,
        criteria.max_price,
        criteria.tenant_type,
        frozenset(criteria.services),
    )
