"""Fare domain model."""

import re
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

_CURRENCY_PATTERN = re.compile(r"[A-Z]{3}")


class FareType(Enum):
    """Passenger category a fare applies to."""

    ADULT = "adult"
    CHILD = "child"
    YOUTH = "youth"
    STUDENT = "student"
    MILITARY = "military"
    SENIOR = "senior"
    DISABLED = "disabled"
    BIKE = "bike"


class Fare(BaseModel):
    """Price of a trip for one passenger category."""

    model_config = ConfigDict(frozen=True)

    name: str | None = None
    type: FareType
    currency: str  # ISO 4217 code, e.g. "EUR"
    fare: float = Field(ge=0)
    unit_name: str | None = None  # e.g. "Zonen"
    units: str | None = None  # e.g. "2"

    @field_validator("currency")
    @classmethod
    def validate_currency(cls, v: str) -> str:
        """Validate the currency is a three-letter ISO 4217 code."""
        if not _CURRENCY_PATTERN.fullmatch(v):
            raise ValueError(f"currency must be a three-letter ISO 4217 code, got {v!r}")
        return v
