"""Currency helpers. All amounts are USD with two decimals."""
import math
from decimal import Decimal, ROUND_HALF_UP
from typing import Any

_CENT = Decimal("0.01")


def to_two_decimals(value: float) -> float:
    """Round to cents, half away from zero on the float's exact value.

    Decimal(value) keeps the binary expansion, so 1.005 (stored as 1.00499...) gives 1.0
    and 0.125 gives 0.13. Applying it twice returns the same number.
    """
    if not math.isfinite(value):
        return 0.0
    return float(Decimal(value).quantize(_CENT, rounding=ROUND_HALF_UP))


def coerce_amount(value: Any) -> float:
    '''Best-effort numeric read: None, garbage, negative and non-finite values become 0.0.'''
    if value is None or isinstance(value, bool):
        return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(number) or number < 0:
        return 0.0
    return number


def line_total(quantity: Any, price: Any) -> float:
    """Unrounded quantity x price; callers round once at the end."""
    return coerce_amount(quantity) * coerce_amount(price)


def format_currency(value: float) -> str:
    amount = to_two_decimals(value)
    sign = "-" if amount < 0 else ""
    return f"{sign}${abs(amount):,.2f}"
