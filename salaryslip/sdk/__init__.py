"""Salary Slip SDK - Per-employee salary slip calculations.

Scope:
- Basic salary, transportation allowance and danger pay (processor.py)
- Danger zone lookup contract and static implementation (zones.py)
- Employee, pay policy and result schemas (schemas.py)
- settings.json / profile.yaml handling (config.py)

Usage:
    from salaryslip.sdk import Employee, SalarySlipProcessor, StaticZoneLookup

    processor = SalarySlipProcessor(StaticZoneLookup(["Ukraine"]))
    employee = Employee(wage="500", working_days=20, duty_station="Ukraine")
    processor.calculate_components(employee).total
"""

from .constants import (
    TRANSPORTATION_ALLOWANCE_AMOUNT,
    DANGER_PAY_AMOUNT,
    TRANSPORTATION_ALLOWANCE_RATES,
)

from .schemas import (
    WorkPlatform,
    Employee,
    PayPolicy,
    SlipComponents,
)

from .zones import (
    ZoneLookup,
    StaticZoneLookup,
    load_zone_lookup,
)

from .processor import (
    SalarySlipProcessor,
    MissingEmployeeError,
    UnknownWorkPlatformError,
    ZoneLookupNotConfiguredError,
)

from .config import (
    get_config_dir,
    get_settings_path,
    load_settings,
    get_profile_path,
    load_profile,
    load_pay_policy,
    ProfileNotFoundError,
    PolicyValidationError,
)

__all__ = [
    # Constants
    "TRANSPORTATION_ALLOWANCE_AMOUNT",
    "DANGER_PAY_AMOUNT",
    "TRANSPORTATION_ALLOWANCE_RATES",
    # Schemas
    "WorkPlatform",
    "Employee",
    "PayPolicy",
    "SlipComponents",
    # Zone lookup
    "ZoneLookup",
    "StaticZoneLookup",
    "load_zone_lookup",
    # Processor
    "SalarySlipProcessor",
    "MissingEmployeeError",
    "UnknownWorkPlatformError",
    "ZoneLookupNotConfiguredError",
    # Config
    "get_config_dir",
    "get_settings_path",
    "load_settings",
    "get_profile_path",
    "load_profile",
    "load_pay_policy",
    "ProfileNotFoundError",
    "PolicyValidationError",
]
