"""Domain type definitions for datepick.

These aliases describe the closed sets of values the core works with:
- DateFormat: one of the two textual date layouts
- LocaleCode: one of the supported display languages
"""

from typing import Literal, get_args

# Day.month.year with dots, or ISO-style year-month-day
DateFormat = Literal["dd.mm.yyyy", "yyyy-mm-dd"]

LocaleCode = Literal["ru", "en", "kk"]

DATE_FORMATS: tuple[DateFormat, ...] = get_args(DateFormat)
SUPPORTED_LOCALES: tuple[LocaleCode, ...] = get_args(LocaleCode)

DEFAULT_DATE_FORMAT: DateFormat = "dd.mm.yyyy"
DEFAULT_LOCALE: LocaleCode = "ru"
