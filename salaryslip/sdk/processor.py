"""Salary slip component calculations.

SalarySlipProcessor computes, for a single employee:
- basic salary: wage x working days, exact Decimal arithmetic
- transportation allowance: tiered by work platform
    office -> full amount, remote -> 0, hybrid -> half
- danger pay: flat amount when the employee is flagged as in danger, or
  when the zone lookup classifies the duty station as a danger zone

Danger pay short-circuits on the explicit flag: the zone lookup is queried
at most once per call, and only when is_danger is False.

Amounts come from the PayPolicy the processor was built with (the constants
module when none is given).

Logging level is controlled by the LOG_LEVEL environment variable.
"""

import logging
import os
from decimal import Decimal
from typing import Optional

from .constants import TRANSPORTATION_ALLOWANCE_RATES
from .schemas import Employee, PayPolicy, SlipComponents, WorkPlatform
from .zones import ZoneLookup

# Configure logging based on LOG_LEVEL environment variable
_log_level = os.environ.get("LOG_LEVEL", "INFO").upper()
logging.basicConfig(
    level=getattr(logging, _log_level, logging.INFO),
    format="%(asctime)s.%(msecs)03d %(levelname)s: %(message)s",
    datefmt="%H:%M:%S"
)
logger = logging.getLogger(__name__)

ZERO = Decimal("0")


class MissingEmployeeError(ValueError):
    """Raised when a calculation is called without an employee."""
    pass


class UnknownWorkPlatformError(ValueError):
    """Raised when an employee's work platform has no allowance tier."""
    pass


class ZoneLookupNotConfiguredError(RuntimeError):
    """Raised when danger pay needs a zone lookup but none was provided."""
    pass


def _require_employee(employee: Optional[Employee], operation: str) -> Employee:
    if employee is None:
        raise MissingEmployeeError(f"{operation}: employee is required")
    return employee


class SalarySlipProcessor:
    """Calculates salary slip components for one employee at a time.

    Holds no per-call state: the same processor can be shared across
    threads as long as its zone lookup supports concurrent queries.
    """

    def __init__(
        self,
        zone_lookup: Optional[ZoneLookup] = None,
        policy: Optional[PayPolicy] = None,
    ):
        """
        Args:
            zone_lookup: Danger zone lookup. Only needed for danger pay on
                         employees without the is_danger flag.
            policy: Pay amounts to use. Defaults to the built-in constants.
        """
        self.zone_lookup = zone_lookup
        self.policy = policy if policy is not None else PayPolicy()

    def calculate_basic_salary(self, employee: Employee) -> Decimal:
        """Calculate basic salary as wage x working days.

        Raises:
            MissingEmployeeError: If employee is None
        """
        employee = _require_employee(employee, "calculate_basic_salary")

        basic = employee.wage * employee.working_days
        logger.debug(
            f"Basic salary: {employee.wage} x {employee.working_days} days = {basic}"
        )
        return basic

    def calculate_transportation_allowance(self, employee: Employee) -> Decimal:
        """Calculate the transportation allowance for the employee's work platform.

        Raises:
            MissingEmployeeError: If employee is None
            UnknownWorkPlatformError: If the platform is not office/remote/hybrid
        """
        employee = _require_employee(employee, "calculate_transportation_allowance")

        platform = employee.work_platform
        try:
            key = WorkPlatform(platform).value
        except ValueError:
            key = None
        rate = TRANSPORTATION_ALLOWANCE_RATES.get(key)
        if rate is None:
            raise UnknownWorkPlatformError(
                f"No transportation allowance tier for work platform {platform!r}. "
                f"Expected one of: {', '.join(TRANSPORTATION_ALLOWANCE_RATES)}"
            )

        allowance = self.policy.transportation_allowance_amount * rate
        logger.debug(f"Transportation allowance ({key}): {allowance}")
        return allowance

    def calculate_danger_pay(self, employee: Employee) -> Decimal:
        """Calculate danger pay.

        Order:
        1. is_danger flag set -> danger pay, lookup not consulted
        2. zone lookup says duty station is a danger zone -> danger pay
        3. otherwise -> 0

        Raises:
            MissingEmployeeError: If employee is None
            ZoneLookupNotConfiguredError: If step 2 is reached without a lookup
        """
        employee = _require_employee(employee, "calculate_danger_pay")

        if employee.is_danger:
            logger.debug("Danger pay: employee flagged as in danger")
            return self.policy.danger_pay_amount

        if self.zone_lookup is None:
            logger.error(
                f"Danger pay for duty station {employee.duty_station!r} needs a zone lookup, "
                f"but the processor was created without one"
            )
            raise ZoneLookupNotConfiguredError(
                "Zone lookup is not configured. Pass zone_lookup= to "
                "SalarySlipProcessor to calculate danger pay for employees "
                "without the is_danger flag."
            )

        if self.zone_lookup.is_danger_zone(employee.duty_station):
            logger.debug(f"Danger pay: {employee.duty_station!r} is a danger zone")
            return self.policy.danger_pay_amount

        logger.debug(f"No danger pay: {employee.duty_station!r} is not a danger zone")
        return ZERO

    def calculate_components(self, employee: Employee) -> SlipComponents:
        """Calculate all salary slip components for an employee.

        Raises:
            MissingEmployeeError: If employee is None
            ZoneLookupNotConfiguredError: See calculate_danger_pay
        """
        employee = _require_employee(employee, "calculate_components")

        return SlipComponents(
            basic_salary=self.calculate_basic_salary(employee),
            transportation_allowance=self.calculate_transportation_allowance(employee),
            danger_pay=self.calculate_danger_pay(employee),
        )
