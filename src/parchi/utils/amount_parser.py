"""Amount parsing utilities."""

import re

_CURRENCY = re.compile(r"(rs\.?|pkr)|[$€£¥₨]", re.IGNORECASE)


def parse_amount(amount_str: str) -> float:
    """Parse an amount string into a float.

    Handles various formats:
    - "123.45"
    - "Rs. 1,234.56", "PKR 1000", "$123.45"
    - "-123.45"
    - "(123.45)" (negative in parentheses)

    Args:
        amount_str: Amount string

    Returns:
        Amount as float

    Raises:
        ValueError: If amount string cannot be parsed
    """
    if not amount_str or not amount_str.strip():
        raise ValueError("Empty amount string")

    amount_str = amount_str.strip()

    is_negative = False
    if amount_str.startswith("(") and amount_str.endswith(")"):
        is_negative = True
        amount_str = amount_str[1:-1]

    amount_str = _CURRENCY.sub("", amount_str.strip())
    amount_str = amount_str.replace(",", "").strip()

    try:
        amount = float(amount_str)
    except ValueError as e:
        raise ValueError(f"Could not parse amount '{amount_str}': {e}")
    if amount != amount or amount in (float("inf"), float("-inf")):
        raise ValueError(f"Could not parse amount '{amount_str}': not a finite number")
    return -amount if is_negative else amount
