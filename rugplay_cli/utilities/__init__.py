"""
Utilities package for the Rugplay CLI.

This package contains constants, console output helpers, formatters,
input validators and local file helpers.
"""

from .console import (
    console,
    out,
    print_error,
    print_info,
    print_raw,
    print_section_header,
    print_success,
    print_warning,
)
from .files import load_image
from .formatters import (
    ChangeDirection,
    classify_change,
    floor_currency,
    format_change,
    format_currency,
    format_number,
    format_quantity,
    format_symbol,
    round_currency,
    slot_glyph,
)
from .logging import configure_logging
from .validators import (
    parse_float,
    parse_positive_float,
    parse_positive_int,
    validate_non_empty_string,
)

__all__ = [
    # Console utilities
    "console",
    "out",
    "print_error",
    "print_info",
    "print_raw",
    "print_section_header",
    "print_success",
    "print_warning",
    # File utilities
    "load_image",
    # Formatting utilities
    "ChangeDirection",
    "classify_change",
    "floor_currency",
    "format_change",
    "format_currency",
    "format_number",
    "format_quantity",
    "format_symbol",
    "round_currency",
    "slot_glyph",
    # Logging
    "configure_logging",
    # Validation utilities
    "parse_float",
    "parse_positive_float",
    "parse_positive_int",
    "validate_non_empty_string",
]
