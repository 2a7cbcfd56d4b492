"""Fixed pay amounts used by salary slip calculations.

These are the process-wide defaults. A profile can override the amounts
through its pay_policy section (see config.load_pay_policy), but the values
here are never mutated.
"""

from decimal import Decimal

# Monthly transportation allowance for a full office worker
TRANSPORTATION_ALLOWANCE_AMOUNT = Decimal("1000.00")

# Flat danger pay for employees flagged or stationed in a danger zone
DANGER_PAY_AMOUNT = Decimal("2500.00")

# Share of the transportation allowance paid per work platform
TRANSPORTATION_ALLOWANCE_RATES = {
    "office": Decimal("1"),
    "remote": Decimal("0"),
    "hybrid": Decimal("0.5"),
}
