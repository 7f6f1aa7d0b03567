"""Gregorian calendar rules."""
from business_logic.instants import InstantLike, to_instant


def is_leap_year_number(year: int) -> bool:
    """Divisible by 4, except centuries that are not divisible by 400."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def is_leap_year(value: InstantLike) -> bool:
    """
    Check whether an instant falls in a leap year.

    The year is read from the UTC-normalized instant.

    Args:
        value: Instant to check

    Returns:
        True for leap years, False otherwise or for an invalid instant
    """
    instant = to_instant(value)
    if instant is None:
        return False
    return is_leap_year_number(instant.year)


def days_in_year(year: int) -> int:
    """Number of days in a Gregorian year."""
    return 366 if is_leap_year_number(year) else 365
