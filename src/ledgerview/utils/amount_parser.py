"""Amount parsing utilities."""

import re
from typing import Union


def parse_amount(amount: Union[str, int]) -> int:
    """Parse a record quantity into an int.

    Handles various formats:
    - 60
    - "60"
    - "+60"
    - "-1,280"
    - "(40)" (negative in parentheses)

    Args:
        amount: Amount value

    Returns:
        Integer amount

    Raises:
        ValueError: If the amount cannot be parsed or is fractional
    """
    if isinstance(amount, bool):
        raise ValueError(f"Could not parse amount {amount!r}")
    if isinstance(amount, int):
        return amount
    if not isinstance(amount, str):
        raise ValueError(f"Could not parse amount {amount!r}")
    if not amount.strip():
        raise ValueError("Empty amount string")

    amount_str = amount.strip()

    # Handle parentheses notation (negative)
    is_negative = False
    if amount_str.startswith("(") and amount_str.endswith(")"):
        is_negative = True
        amount_str = amount_str[1:-1]

    # Remove thousands separators and whitespace
    amount_str = re.sub(r"[,\s]", "", amount_str)

    if not re.fullmatch(r"[+-]?\d+", amount_str):
        raise ValueError(f"Could not parse amount '{amount}': expected a whole number")

    value = int(amount_str)
    return -value if is_negative else value
