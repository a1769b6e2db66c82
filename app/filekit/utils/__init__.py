"""Utility modules for filekit.

This module exports commonly used console helpers.
"""

from filekit.utils.formatting import (
    console,
    create_location_table,
    err_console,
    print_error,
    print_info,
    print_success,
    print_warning,
)

__all__ = [
    "console",
    "create_location_table",
    "err_console",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
]
