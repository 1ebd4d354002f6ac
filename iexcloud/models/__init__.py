"""Data models for IEX Cloud requests and responses."""

from .config import Environment, IexCloudConfig
from .duration import Duration, new_duration
from .events import DividendResultItem, DividendResults, NewsResultItem, NewsResults
from .stock import (
    IntradayItem,
    IntradayResult,
    QuoteResult,
    SearchResultItem,
    SearchResults,
)

__all__ = [
    "Environment",
    "IexCloudConfig",
    "Duration",
    "new_duration",
    "QuoteResult",
    "IntradayItem",
    "IntradayResult",
    "SearchResultItem",
    "SearchResults",
    "NewsResultItem",
    "NewsResults",
    "DividendResultItem",
    "DividendResults",
]
