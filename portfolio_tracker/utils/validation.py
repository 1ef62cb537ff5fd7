from decimal import Decimal, InvalidOperation
from typing import Optional

QUANTITY_DECIMALS = 4
PRICE_DECIMALS = 2


def check_decimals(value: float, max_decimals: int) -> float:
    """Reject values finer than the input step (0.0001 for quantities, 0.01 for prices)."""
    try:
        exponent = Decimal(str(value)).normalize().as_tuple().exponent
    except InvalidOperation:
        raise ValueError("must be a number")
    if not isinstance(exponent, int):
        raise ValueError("must be a finite number")
    if exponent < -max_decimals:
        raise ValueError(f"must have at most {max_decimals} decimal places")
    return value


def required_text(value: str) -> str:
    value = value.strip()
    if not value:
        raise ValueError("must not be blank")
    return value


def normalize_symbol(value: str) -> str:
    return required_text(value).upper()


def blank_to_none(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None
