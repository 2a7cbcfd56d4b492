"""Pydantic schemas for salary slip inputs and results.

All schemas use extra='forbid' to reject unknown fields, so a typo in an
employee record or in the pay_policy section of profile.yaml fails loudly
instead of being ignored. Models are frozen: an Employee cannot change while
a calculation is running.

Currency amounts are Decimal everywhere. Floats are converted through str()
so 0.1 becomes Decimal("0.1"), not its binary expansion.
"""

from decimal import Decimal
from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .constants import DANGER_PAY_AMOUNT, TRANSPORTATION_ALLOWANCE_AMOUNT


def _to_decimal(value: Any) -> Any:
    """Convert floats via their shortest repr to avoid binary rounding drift."""
    if isinstance(value, float):
        return Decimal(str(value))
    return value


class WorkPlatform(str, Enum):
    """Employee work arrangement, determines the transportation allowance tier."""

    OFFICE = "office"
    REMOTE = "remote"
    HYBRID = "hybrid"

    @classmethod
    def _missing_(cls, value: object) -> Optional["WorkPlatform"]:
        # Accept "Office", "REMOTE", " hybrid " from config files
        if isinstance(value, str):
            normalized = value.strip().lower()
            for member in cls:
                if member.value == normalized:
                    return member
        return None


class Employee(BaseModel):
    """Employee attributes needed for salary slip calculations."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    wage: Decimal = Field(default=Decimal("0"), ge=0, description="Wage per working day")
    working_days: int = Field(default=0, ge=0, description="Working days in the period")
    work_platform: WorkPlatform = Field(
        default=WorkPlatform.OFFICE,
        description="Office, remote or hybrid work arrangement",
    )
    is_danger: bool = Field(
        default=False,
        description="Explicit danger pay flag; skips the danger zone lookup when set",
    )
    duty_station: Optional[str] = Field(
        default=None, description="Work location used for the danger zone lookup"
    )

    @field_validator("wage", mode="before")
    @classmethod
    def coerce_wage(cls, value: Any) -> Any:
        return _to_decimal(value)


class PayPolicy(BaseModel):
    """Configurable pay amounts and danger zones.

    Loaded from the pay_policy section of profile.yaml. Defaults match the
    constants module, so PayPolicy() reproduces the built-in amounts.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    transportation_allowance_amount: Decimal = Field(
        default=TRANSPORTATION_ALLOWANCE_AMOUNT, ge=0,
        description="Full transportation allowance (office workers)",
    )
    danger_pay_amount: Decimal = Field(
        default=DANGER_PAY_AMOUNT, ge=0,
        description="Flat danger pay amount",
    )
    danger_zones: List[str] = Field(
        default_factory=list,
        description="Duty stations classified as danger zones",
    )

    @field_validator("transportation_allowance_amount", "danger_pay_amount", mode="before")
    @classmethod
    def coerce_amounts(cls, value: Any) -> Any:
        return _to_decimal(value)


class SlipComponents(BaseModel):
    """Calculated salary slip components for one employee."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    basic_salary: Decimal = Field(..., description="Wage x working days")
    transportation_allowance: Decimal = Field(..., description="Platform-tiered allowance")
    danger_pay: Decimal = Field(..., description="Danger pay, zero when not eligible")

    @property
    def total(self) -> Decimal:
        """Sum of all components."""
        return self.basic_salary + self.transportation_allowance + self.danger_pay
