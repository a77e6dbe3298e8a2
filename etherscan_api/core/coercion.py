"""Conversion of the API's string-encoded numbers."""

import re
from typing import Annotated, Any

from pydantic import BeforeValidator

from etherscan_api.constants import U64_MAX, U128_MAX
from etherscan_api.core.exceptions import CoercionError

_UNSIGNED_RE = re.compile(r"\+?[0-9]+")


def parse_uint(value: Any, maximum: int = U64_MAX, target: str = "u64") -> int:
    """
    Convert a decimal string to an unsigned integer bounded by ``maximum``.

    Only ASCII digits with an optional leading ``+`` are accepted; whitespace,
    signs, underscores and fractional parts are rejected. Integers (but not
    bools) pass through after the range check.

    Raises:
        CoercionError: If the value is not an in-range unsigned integer.
    """
    if isinstance(value, int) and not isinstance(value, bool):
        number = value
    elif isinstance(value, str) and _UNSIGNED_RE.fullmatch(value):
        # Leading zeros are legal; bound the digit count before int()
        digits = value.lstrip("+").lstrip("0") or "0"
        if len(digits) > len(str(maximum)):
            raise CoercionError(value, target)
        number = int(digits)
    else:
        raise CoercionError(value, target)

    if number < 0 or number > maximum:
        raise CoercionError(value, target)
    return number


def parse_u128(value: Any) -> int:
    """Convert a decimal string to an unsigned 128-bit integer."""
    return parse_uint(value, U128_MAX, "u128")


def parse_optional_u64(value: Any) -> int | None:
    """Like :func:`parse_uint`, but an empty string or None yields None."""
    if value is None or value == "":
        return None
    return parse_uint(value)


def parse_float(value: Any) -> float:
    """Convert a decimal string to a float."""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)
    if isinstance(value, str) and value == value.strip() and "_" not in value:
        try:
            return float(value)
        except ValueError as e:
            raise CoercionError(value, "float") from e
    raise CoercionError(value, "float")


# Field types for records whose numbers arrive as JSON strings
U64 = Annotated[int, BeforeValidator(parse_uint)]
U128 = Annotated[int, BeforeValidator(parse_u128)]
OptionalU64 = Annotated[int | None, BeforeValidator(parse_optional_u64)]
Float = Annotated[float, BeforeValidator(parse_float)]
