"""Tests for employee and pay policy schemas."""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from salaryslip.sdk.constants import DANGER_PAY_AMOUNT, TRANSPORTATION_ALLOWANCE_AMOUNT
from salaryslip.sdk.schemas import Employee, PayPolicy, SlipComponents, WorkPlatform


class TestEmployee:
    """Employee validation and defaults."""

    def test_defaults(self):
        employee = Employee()

        assert employee.wage == Decimal("0")
        assert employee.working_days == 0
        assert employee.work_platform == WorkPlatform.OFFICE
        assert employee.is_danger is False
        assert employee.duty_station is None

    def test_float_wage_converted_exactly(self):
        employee = Employee(wage=0.1)

        assert employee.wage == Decimal("0.1")

    def test_negative_wage_rejected(self):
        with pytest.raises(ValidationError):
            Employee(wage=Decimal("-1"))

    def test_negative_working_days_rejected(self):
        with pytest.raises(ValidationError):
            Employee(working_days=-5)

    def test_unknown_platform_rejected(self):
        with pytest.raises(ValidationError):
            Employee(work_platform="onsite")

    def test_unknown_field_rejected(self):
        with pytest.raises(ValidationError):
            Employee(salary=100)

    def test_frozen(self):
        employee = Employee(wage=Decimal("500"))

        with pytest.raises(ValidationError):
            employee.wage = Decimal("600")

    def test_from_json(self):
        employee = Employee.model_validate_json(
            '{"wage": "500.25", "working_days": 20, "work_platform": "hybrid", '
            '"duty_station": "Ukraine"}'
        )

        assert employee.wage == Decimal("500.25")
        assert employee.work_platform == WorkPlatform.HYBRID
        assert employee.duty_station == "Ukraine"


class TestWorkPlatform:
    """Platform parsing from config values."""

    @pytest.mark.parametrize("raw,expected", [
        ("office", WorkPlatform.OFFICE),
        ("Office", WorkPlatform.OFFICE),
        ("REMOTE", WorkPlatform.REMOTE),
        (" hybrid ", WorkPlatform.HYBRID),
    ])
    def test_case_insensitive(self, raw, expected):
        assert WorkPlatform(raw) == expected

    def test_unknown_value(self):
        with pytest.raises(ValueError):
            WorkPlatform("onsite")


class TestPayPolicy:
    """Pay policy defaults and validation."""

    def test_defaults_match_constants(self):
        policy = PayPolicy()

        assert policy.transportation_allowance_amount == TRANSPORTATION_ALLOWANCE_AMOUNT
        assert policy.danger_pay_amount == DANGER_PAY_AMOUNT
        assert policy.danger_zones == []

    def test_float_amounts_converted_exactly(self):
        policy = PayPolicy(danger_pay_amount=3000.10)

        assert policy.danger_pay_amount == Decimal("3000.1")

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError):
            PayPolicy(danger_pay_amount=-1)

    def test_unknown_key_rejected(self):
        with pytest.raises(ValidationError):
            PayPolicy(danger_pay=100)


class TestSlipComponents:
    """Slip total."""

    def test_total(self):
        slip = SlipComponents(
            basic_salary=Decimal("10000"),
            transportation_allowance=Decimal("500.00"),
            danger_pay=Decimal("0"),
        )

        assert slip.total == Decimal("10500.00")
