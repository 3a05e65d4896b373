"""Locale string tables and lookup.

Each supported language has one immutable bundle of display strings. Lookup
is total: anything that is not a known locale code gets the default bundle.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from datepick.domain.models import SUPPORTED_LOCALES, DateFormat


@dataclass(frozen=True)
class LocaleBundle:
    """Immutable display strings for one language.

    Weekday names are ordered Sunday first, matching date weekday indexes
    returned by get_first_day_of_month.
    """

    code: str
    months: tuple[str, ...]
    months_short: tuple[str, ...]
    weekdays_min: tuple[str, ...]
    today: str
    placeholder: Mapping[DateFormat, str]

    def __post_init__(self) -> None:
        if len(self.months) != 12 or len(self.months_short) != 12:
            raise ValueError(f"Locale {self.code!r} must define 12 month names")
        if len(self.weekdays_min) != 7:
            raise ValueError(f"Locale {self.code!r} must define 7 weekday names")


RU = LocaleBundle(
    code="ru",
    months=(
        "Январь", "Февраль", "Март", "Апрель", "Май", "Июнь",
        "Июль", "Август", "Сентябрь", "Октябрь", "Ноябрь", "Декабрь",
    ),
    months_short=(
        "Янв", "Фев", "Мар", "Апр", "Май", "Июн",
        "Июл", "Авг", "Сен", "Окт", "Ноя", "Дек",
    ),
    weekdays_min=("Вс", "Пн", "Вт", "Ср", "Чт", "Пт", "Сб"),
    today="Сегодня",
    placeholder=MappingProxyType({"dd.mm.yyyy": "дд.мм.гггг", "yyyy-mm-dd": "гггг-мм-дд"}),
)

EN = LocaleBundle(
    code="en",
    months=(
        "January", "February", "March", "April", "May", "June",
        "July", "August", "September", "October", "November", "December",
    ),
    months_short=(
        "Jan", "Feb", "Mar", "Apr", "May", "Jun",
        "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
    ),
    weekdays_min=("Su", "Mo", "Tu", "We", "Th", "Fr", "Sa"),
    today="Today",
    placeholder=MappingProxyType({"dd.mm.yyyy": "dd.mm.yyyy", "yyyy-mm-dd": "yyyy-mm-dd"}),
)

KK = LocaleBundle(
    code="kk",
    months=(
        "Қаңтар", "Ақпан", "Наурыз", "Сәуір", "Мамыр", "Маусым",
        "Шілде", "Тамыз", "Қыркүйек", "Қазан", "Қараша", "Желтоқсан",
    ),
    months_short=(
        "Қаң", "Ақп", "Нау", "Сәу", "Мам", "Мау",
        "Шіл", "Там", "Қыр", "Қаз", "Қар", "Жел",
    ),
    weekdays_min=("Жс", "Дс", "Сс", "Ср", "Бс", "Жм", "Сб"),
    today="Бүгін",
    placeholder=MappingProxyType({"dd.mm.yyyy": "кк.аа.жжжж", "yyyy-mm-dd": "жжжж-аа-кк"}),
)

DEFAULT_BUNDLE = RU


def get_locale(code: str | None) -> LocaleBundle:
    """Get the display strings for a locale.

    Args:
        code: Locale code such as "en". May be unknown or None.

    Returns:
        The matching bundle, or the default (Russian) bundle for any
        unrecognized code.
    """
    match code:
        case "en":
            return EN
        case "kk":
            return KK
        case "ru":
            return RU
        case _:
            return DEFAULT_BUNDLE


def is_supported_locale(code: str | None) -> bool:
    """Check whether a code names one of the built-in locales."""
    return code in SUPPORTED_LOCALES


def get_weekday_labels(bundle: LocaleBundle, start_week_on_monday: bool = True) -> tuple[str, ...]:
    """Get weekday header labels in calendar column order.

    Args:
        bundle: Locale bundle.
        start_week_on_monday: Whether the first column is Monday.

    Returns:
        Seven short weekday names.
    """
    if start_week_on_monday:
        return bundle.weekdays_min[1:] + bundle.weekdays_min[:1]
    return bundle.weekdays_min


def format_month_title(bundle: LocaleBundle, year: int, month: int, short: bool = False) -> str:
    """Format a calendar header such as "February 2024".

    Args:
        bundle: Locale bundle.
        year: Four-digit year.
        month: Month number (1-12).
        short: Use abbreviated month names.

    Returns:
        Month name followed by the year.
    """
    names = bundle.months_short if short else bundle.months
    return f"{names[month - 1]} {year}"


def get_placeholder(bundle: LocaleBundle, date_format: DateFormat) -> str:
    """Get the empty-input placeholder for a date format."""
    return bundle.placeholder[date_format]
