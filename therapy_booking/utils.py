"""Shared utilities used across the booking chat."""

from datetime import date

# Short numeric date layouts keyed by locale tag. Unknown locales fall back to en-US.
_SHORT_DATE_LAYOUTS: dict[str, str] = {
    "en-US": "{month}/{day}/{year}",
    "en-GB": "{day:02d}/{month:02d}/{year}",
    "en-AU": "{day}/{month}/{year}",
    "en-CA": "{year}-{month:02d}-{day:02d}",
    "de-DE": "{day}.{month}.{year}",
    "fr-FR": "{day:02d}/{month:02d}/{year}",
    "es-ES": "{day}/{month}/{year}",
    "ja-JP": "{year}/{month}/{day}",
}


def format_short_date(value: date, locale: str = "en-US") -> str:
    """Render a calendar date as a locale-aware numeric short date.

    Examples:
        >>> format_short_date(date(2024, 6, 1))
        '6/1/2024'
        >>> format_short_date(date(2024, 6, 1), "en-GB")
        '01/06/2024'
    """
    layout = _SHORT_DATE_LAYOUTS.get(
        locale.replace("_", "-"), _SHORT_DATE_LAYOUTS["en-US"]
    )
    return layout.format(day=value.day, month=value.month, year=value.year)

