"""IEX Cloud REST client and query options."""

from .client import IexCloudApiError, IexCloudClient
from .options import QueryOption, calendar, date_range, limit, subattribute

__all__ = [
    "IexCloudClient",
    "IexCloudApiError",
    "QueryOption",
    "date_range",
    "calendar",
    "limit",
    "subattribute",
]
