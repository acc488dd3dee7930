"""
Utility functions for ukcovidpy package
"""

from datetime import date, datetime
from typing import Iterable

DATE_FORMAT = '%Y-%m-%d'


def format_date(value: date) -> str:
    """
    Format a date the way the API expects it.

    Args:
        value: Date (or datetime, whose time part is dropped)

    Returns:
        Date string in ``YYYY-MM-DD`` form

    Example:
        >>> format_date(date(2020, 11, 3))
        '2020-11-03'
    """
    return value.strftime(DATE_FORMAT)


def parse_date(value: str) -> date:
    """
    Parse an API date string.

    Args:
        value: Date string in ``YYYY-MM-DD`` form

    Returns:
        datetime.date

    Raises:
        ValueError: If the string is not a valid date

    Example:
        >>> parse_date('2020-11-03')
        datetime.date(2020, 11, 3)
    """
    return datetime.strptime(value, DATE_FORMAT).date()


def join_filters(pairs: Iterable[str]) -> str:
    """
    Join encoded ``field=value`` pairs into a filters parameter.

    Example:
        >>> join_filters(['areaType=nation', 'areaName=england'])
        'areaType=nation;areaName=england'
    """
    return ';'.join(pairs)


def format_structure(names: Iterable[str]) -> str:
    """
    Format field names as the bracketed, quoted structure parameter.

    The quotes are sent percent-encoded and the order of ``names`` is kept,
    since response rows are aligned to it.

    Example:
        >>> format_structure(['date', 'newCasesByPublishDate'])
        '[%22date%22,%22newCasesByPublishDate%22]'
    """
    return '[' + ','.join(f'%22{name}%22' for name in names) + ']'


def normalize_area_name(name: str) -> str:
    """
    Normalise an area name for use in a filter.

    Area names are matched in lowercase by the API; requests send them
    as given, so callers normalise with this helper.

    Example:
        >>> normalize_area_name('  England ')
        'england'
    """
    return name.strip().lower()


def is_normalized_area_name(name: str) -> bool:
    """Return True if ``name`` is already in the form the API matches on."""
    return name == normalize_area_name(name)
