"""
Input validation helpers shared by the account and post services.
"""

import math
import re
from typing import Any, Optional, Union

from sports_buddy.utils.errors import ValidationError

EMAIL_REGEX = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
MIN_PASSWORD_LENGTH = 6
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

_LEADING_INTEGER_REGEX = re.compile(r"^\s*([+-]?\d+)")


def is_valid_email(email: str) -> bool:
    """Return True when `email` has a ``local@domain.tld`` shape."""
    return EMAIL_REGEX.fullmatch(email) is not None


def require_fields(message: str, *values: Any) -> None:
    """
    Raise `ValidationError(message)` unless every value is present and non-empty.

    Presence follows truthiness: ``None``, ``""`` and ``0`` all count as missing.
    """
    if not all(values):
        raise ValidationError(message)

def password_length(password: str) -> int:
    """Length of `password` in UTF-16 code units, so an emoji counts as two."""
    return len(password.encode("utf-16-le")) // 2


def parse_mobile(value: Any) -> Optional[Union[int, float]]:
    """
    Parse a mobile number into an integer, or ``None``.

    Integers pass through, floats are truncated and strings contribute their leading
    (optionally signed) run of digits, so ``"98765 43210"`` gives ``98765``. Falsy
    values, non-finite floats and strings without leading digits give ``None``.

    BSON integers are at most 64 bits wide; a number outside that range is kept as
    a (lossy) float.
    """
    if not value or isinstance(value, bool):
        return None
    if isinstance(value, float):
        if not math.isfinite(value):
            return None
        number = int(value)
    elif isinstance(value, int):
        number = value
    else:
        match = _LEADING_INTEGER_REGEX.match(str(value))
        if match is None:
            return None
        number = int(match.group(1))
    if not INT64_MIN <= number <= INT64_MAX:
        return float(number)
    return number
