"""Query options for time-series requests."""

from collections.abc import Mapping
from dataclasses import dataclass

from iexcloud.models.duration import Duration


@dataclass(frozen=True)
class QueryOption:
    """A ``key=value`` fragment appended to a request URL.

    Options are not validated against each other; the client appends them in
    the order given.
    """

    key: str
    value: str

    def __str__(self) -> str:
        return f"{self.key}={self.value}"


def date_range(duration: Duration) -> QueryOption:
    """Restrict a time-series query to the given lookback window."""
    return QueryOption("range", str(duration))


def calendar(value: bool) -> QueryOption:
    """Interpret the range as calendar dates (e.g. upcoming events)."""
    return QueryOption("calendar", "true" if value else "false")


def limit(count: int) -> QueryOption:
    """Restrict the number of results."""
    if count < 0:
        raise ValueError(f"limit must be non-negative, got {count}")
    return QueryOption("limit", str(count))


def subattribute(key_values: Mapping[str, str]) -> QueryOption:
    """Filter on sub-attributes, serialized as ``k1|v1,k2|v2``."""
    return QueryOption("subattribute", ",".join(f"{k}|{v}" for k, v in key_values.items()))
