"""
Input validation utilities.

Every numeric command argument goes through these helpers, so a bad token
is reported before any request is made.
"""

import math

from ..core.exceptions import ValidationError


def parse_float(value: str, name: str) -> float:
    """Parse a finite float or raise ``ValidationError``."""
    try:
        number = float(value)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name} must be a number, got {value!r}") from e
    if not math.isfinite(number):
        raise ValidationError(f"{name} must be a finite number, got {value!r}")
    return number


def parse_positive_float(value: str, name: str) -> float:
    """Parse a float that must be strictly positive."""
    number = parse_float(value, name)
    if number <= 0:
        raise ValidationError(f"{name} must be positive, got {value}")
    return number


def parse_positive_int(value: str, name: str) -> int:
    """Parse a strictly positive integer."""
    try:
        number = int(value)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name} must be a whole number, got {value!r}") from e
    if number <= 0:
        raise ValidationError(f"{name} must be positive, got {value}")
    return number


def validate_non_empty_string(value: str, name: str) -> str:
    """Validate that a string is not empty and return it stripped."""
    if not value or not value.strip():
        raise ValidationError(f"{name} cannot be empty")
    return value.strip()
