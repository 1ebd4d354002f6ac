"""Client library for the IEX Cloud market data API."""

from .fetchers import (
    IexCloudApiError,
    IexCloudClient,
    QueryOption,
    calendar,
    date_range,
    limit,
    subattribute,
)
from .models import (
    DividendResultItem,
    DividendResults,
    Duration,
    Environment,
    IexCloudConfig,
    IntradayItem,
    IntradayResult,
    NewsResultItem,
    NewsResults,
    QuoteResult,
    SearchResultItem,
    SearchResults,
    new_duration,
)

__version__ = "0.1.0"

__all__ = [
    "IexCloudClient",
    "IexCloudApiError",
    "IexCloudConfig",
    "Environment",
    "Duration",
    "new_duration",
    "QueryOption",
    "date_range",
    "calendar",
    "limit",
    "subattribute",
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
