"""Remaining-time arithmetic for the countdown."""

from dataclasses import dataclass
from datetime import datetime

from ..constants import SECONDS_PER_DAY, SECONDS_PER_HOUR, SECONDS_PER_MINUTE

_MICROSECONDS_PER_SECOND = 1_000_000


@dataclass(frozen=True)
class DecomposedTime:
    """A non-negative duration split into days, hours, minutes and seconds."""

    days: int
    hours: int
    minutes: int
    seconds: int

    @property
    def total_seconds(self) -> int:
        return (
            self.days * SECONDS_PER_DAY
            + self.hours * SECONDS_PER_HOUR
            + self.minutes * SECONDS_PER_MINUTE
            + self.seconds
        )

    def padded(self) -> tuple[str, str, str, str]:
        """Return the four values as display strings, days first."""
        return (
            pad_unit(self.days),
            pad_unit(self.hours),
            pad_unit(self.minutes),
            pad_unit(self.seconds),
        )


def compute_remaining(now: datetime, target: datetime) -> int:
    """
    Compute whole seconds from ``now`` until ``target``.

    The result is truncated toward zero and is zero or negative once the
    target has been reached.

    Args:
        now: The current instant
        target: The instant being counted down to

    Returns:
        Signed remaining seconds
    """
    delta = target - now
    micros = (delta.days * SECONDS_PER_DAY + delta.seconds) * _MICROSECONDS_PER_SECOND + delta.microseconds
    whole = abs(micros) // _MICROSECONDS_PER_SECOND
    return whole if micros >= 0 else -whole


def decompose(total_seconds: int) -> DecomposedTime:
    """
    Split a non-negative number of seconds into days, hours, minutes and seconds.

    Raises:
        ValueError: If total_seconds is negative
    """
    if total_seconds < 0:
        raise ValueError(f"Cannot decompose negative duration: {total_seconds}")

    days, rest = divmod(total_seconds, SECONDS_PER_DAY)
    hours, rest = divmod(rest, SECONDS_PER_HOUR)
    minutes, seconds = divmod(rest, SECONDS_PER_MINUTE)
    return DecomposedTime(days=days, hours=hours, minutes=minutes, seconds=seconds)


def pad_unit(value: int) -> str:
    """Zero-pad a unit value to at least two digits."""
    return str(value).rjust(2, "0")
