"""Domain models and types for datepick.

This package contains the functional core:
- Pure functions with no side effects
- No I/O operations
- Easy to test
- Calendar logic separated from rendering
"""

from datepick.domain.models import (
    DATE_FORMATS,
    DEFAULT_DATE_FORMAT,
    DEFAULT_LOCALE,
    SUPPORTED_LOCALES,
    DateFormat,
    LocaleCode,
)

__all__ = [
    "DATE_FORMATS",
    "DEFAULT_DATE_FORMAT",
    "DEFAULT_LOCALE",
    "SUPPORTED_LOCALES",
    "DateFormat",
    "LocaleCode",
]
