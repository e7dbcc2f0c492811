"""Guard clauses for raw health score inputs.

Every validator takes the value and the field name used in the error message,
raises ``InvalidInputError`` on the first violation and otherwise returns the
value unchanged so calls can be chained.
"""

from __future__ import annotations

import math
import numbers
from typing import Any

from customer_health.exception import InvalidInputError


def _display(value: Any) -> str:
    try:
        return repr(value)
    except ValueError:
        # ints past the str conversion digit limit
        return f"<{type(value).__name__} too large to display>"


def require_value(value: Any, field_name: str) -> Any:
    if value is None:
        raise InvalidInputError(field_name, "is required but was not provided")
    return value


def require_finite_number(value: Any, field_name: str) -> float:
    # bool is an int subclass; a flag is never a metric.
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidInputError(field_name, f"must be a finite number, got {_display(value)}")
    # Integers are always finite and may be too large to convert to float.
    if isinstance(value, numbers.Integral):
        return value
    if math.isnan(value) or math.isinf(value):
        raise InvalidInputError(field_name, f"must be a finite number, got {_display(value)}")
    return value


def require_non_negative(value: float, field_name: str) -> float:
    if value < 0:
        raise InvalidInputError(field_name, f"must be non-negative, got {_display(value)}")
    return value


def require_in_range(value: float, minimum: float, maximum: float, field_name: str) -> float:
    if value < minimum or value > maximum:
        raise InvalidInputError(field_name, f"must be between {minimum} and {maximum}, got {_display(value)}")
    return value


def require_bool(value: Any, field_name: str) -> bool:
    if not isinstance(value, bool):
        raise InvalidInputError(field_name, f"must be a boolean, got {_display(value)}")
    return value


def require_non_negative_number(value: Any, field_name: str) -> float:
    """Presence, finiteness and sign checks for a required metric, in that order."""
    require_value(value, field_name)
    require_finite_number(value, field_name)
    return require_non_negative(value, field_name)


__all__ = [
    "require_bool",
    "require_finite_number",
    "require_in_range",
    "require_non_negative",
    "require_non_negative_number",
    "require_value",
]
