"""Lookback window used to bound historical queries."""

import re
from dataclasses import dataclass
from datetime import timedelta


DAY = timedelta(days=1)
MONTH = 30 * DAY
YEAR = 365 * DAY

_TOKEN_PATTERN = re.compile(r"^(\d+)([dmy])$")


@dataclass(frozen=True)
class Duration:
    """How far back historical data should be queried.

    Only the largest unit is significant: if ``max`` is set the other fields
    are ignored, then years, months and days in that order.
    """

    max: bool = False
    years: int = 0
    months: int = 0
    days: int = 0

    def __str__(self) -> str:
        if self.max:
            return "max"
        if self.years != 0:
            return f"{self.years}y"
        if self.months != 0:
            return f"{self.months}m"
        if self.days != 0:
            return f"{self.days}d"
        return "1d"

    @classmethod
    def from_timedelta(cls, dur: timedelta) -> "Duration":
        """Convert a timedelta to the coarsest unit that fits it."""
        if dur < DAY:
            return cls(days=1)
        if dur < MONTH:
            return cls(days=dur // DAY)
        if dur < YEAR:
            return cls(months=dur // MONTH)
        return cls(years=dur // YEAR)

    @classmethod
    def parse(cls, token: str) -> "Duration":
        """Parse a range token such as ``max``, ``5d``, ``3m`` or ``2y``.

        Raises:
            ValueError: If the token is not a valid range
        """
        token = token.strip().lower()
        if token == "max":
            return cls(max=True)

        match = _TOKEN_PATTERN.match(token)
        if not match:
            raise ValueError(f"Invalid range: {token!r} (expected max, Nd, Nm or Ny)")

        count, unit = int(match.group(1)), match.group(2)
        if unit == "y":
            return cls(years=count)
        if unit == "m":
            return cls(months=count)
        return cls(days=count)


def new_duration(dur: timedelta) -> Duration:
    """Return the query duration for a timedelta."""
    return Duration.from_timedelta(dur)
