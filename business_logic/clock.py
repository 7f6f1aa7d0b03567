"""Angles between the hands of a 12-hour analog clock."""
import math
from typing import Optional, Tuple

from business_logic.instants import InstantLike, to_instant

FULL_TURN = 2 * math.pi


def clock_hand_angles(value: InstantLike) -> Optional[Tuple[float, float]]:
    """
    Positions of the hour and minute hands, clockwise from 12, in radians.

    The hour hand moves continuously, so at 3:30 it sits halfway between
    3 and 4. Only the UTC hour and minute are used.

    Returns:
        (hour_angle, minute_angle) tuple, or None for an invalid instant
    """
    instant = to_instant(value)
    if instant is None:
        return None

    hour_fraction = ((instant.hour % 12) + instant.minute / 60) / 12
    minute_fraction = instant.minute / 60
    return hour_fraction * FULL_TURN, minute_fraction * FULL_TURN


def angle_between_clock_hands(value: InstantLike) -> float:
    """
    Smaller angle between the hour and minute hands, in radians.

    Args:
        value: Instant whose UTC time is read off the clock

    Returns:
        Angle in [0, pi], or nan for an invalid instant
    """
    angles = clock_hand_angles(value)
    if angles is None:
        return math.nan

    hour_angle, minute_angle = angles
    difference = abs(hour_angle - minute_angle)
    if difference > math.pi:
        difference = FULL_TURN - difference
    return difference


def radians_to_degrees(radians: float) -> float:
    """Convert an angle for display, e.g. pi / 2 -> 90.0."""
    return math.degrees(radians)
