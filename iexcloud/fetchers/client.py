"""IEX Cloud REST client."""

import logging
from functools import lru_cache
from typing import Any, TypeVar
from urllib.parse import quote

import httpx
from pydantic import TypeAdapter

from iexcloud.models.config import Environment, IexCloudConfig, mask_token
from iexcloud.models.duration import Duration
from iexcloud.models.events import DividendResultItem, DividendResults, NewsResultItem, NewsResults
from iexcloud.models.stock import (
    IntradayItem,
    IntradayResult,
    QuoteResult,
    SearchResultItem,
    SearchResults,
)

from .options import QueryOption


logger = logging.getLogger(__name__)

T = TypeVar("T")

TOKEN_PARAM = "?token={token}"
QUOTE_PATH = "stock/{symbol}/quote"
INTRADAY_PATH = "stock/{symbol}/intraday-prices"
HISTORICAL_PATH = "stock/{symbol}/chart/{duration}"
DIVIDENDS_PATH = "stock/{symbol}/dividends/{duration}"
SEARCH_PATH = "search/{query}"
TIME_SERIES_PATH = "time-series"


class IexCloudApiError(Exception):
    """Non-success HTTP status returned by IEX Cloud.

    ``message`` is the raw response body; it is not parsed as JSON.
    """

    def __init__(self, code: int, message: str):
        super().__init__(f"status code: {code} => message: {message}")
        self.code = code
        self.message = message


@lru_cache(maxsize=64)
def _type_adapter(target: Any) -> TypeAdapter:
    return TypeAdapter(target)


def _segment(value: str) -> str:
    """Percent-encode a single path segment."""
    return quote(str(value), safe="")


class IexCloudClient:
    """Client for the IEX Cloud stable API.

    Each method issues exactly one GET request and decodes the JSON body
    into a typed result. Nothing is retried or cached. The instance holds no
    per-call state and can be shared between threads.

    Errors propagate to the caller:
        httpx.TransportError: Network, TLS or timeout failure
        IexCloudApiError: Response status >= 400
        pydantic.ValidationError: Body is not valid JSON or has the wrong shape
    """

    def __init__(
        self,
        token: str,
        environment: Environment = Environment.PRODUCTION,
        *,
        timeout: float = 30.0,
        headers: dict[str, str] | None = None,
        http_client: httpx.Client | None = None,
    ):
        self.environment = Environment(environment)
        self.base_url = self.environment.base_url
        self.timeout = timeout
        self._token = token
        self._token_param = TOKEN_PARAM.format(token=token)
        self._owns_client = http_client is None
        # Never replaced after construction
        self._client = http_client if http_client is not None else httpx.Client(
            timeout=timeout,
            headers=dict(headers or {}),
            follow_redirects=True,
        )

    @classmethod
    def from_config(
        cls,
        config: IexCloudConfig,
        http_client: httpx.Client | None = None,
    ) -> "IexCloudClient":
        """Create a client from a loaded configuration."""
        return cls(
            config.token,
            config.environment,
            timeout=config.timeout,
            headers=config.headers,
            http_client=http_client,
        )

    def close(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "IexCloudClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def build_url(self, path: str, options: tuple[QueryOption, ...] = ()) -> str:
        """Build a request URL from an API path and query options.

        Args:
            path: Path relative to the stable API root (e.g. 'stock/AAPL/quote')
            options: Query options appended after the token, in order

        Returns:
            Full request URL including the token parameter
        """
        url = self.base_url + path + self._token_param
        for option in options:
            url += f"&{option}"
        return url

    def _safe_url(self, url: str) -> str:
        """URL with the token masked, for logging."""
        return url.replace(self._token_param, TOKEN_PARAM.format(token=mask_token(self._token)), 1)

    def call_and_decode(self, url: str, target: type[T] | Any, *, timeout: float | None = None) -> T:
        """GET ``url`` and decode the JSON body into ``target``.

        Args:
            url: Full request URL
            target: Any type pydantic can validate (model, list[Model], dict, ...)
            timeout: Per-call timeout in seconds (defaults to the client timeout)

        Returns:
            Decoded body

        Raises:
            httpx.TransportError: If the request fails or times out
            IexCloudApiError: If the status code is >= 400
            pydantic.ValidationError: If the body cannot be decoded into target
        """
        logger.debug(f"GET {self._safe_url(url)}")

        response = self._client.get(url, timeout=self.timeout if timeout is None else timeout)

        if response.status_code >= 400:
            logger.warning(f"IEX Cloud returned {response.status_code} for {self._safe_url(url)}")
            raise IexCloudApiError(response.status_code, response.text)

        return _type_adapter(target).validate_json(response.content)

    def quote(self, symbol: str, *, timeout: float | None = None) -> QuoteResult:
        """Get the latest quote for a symbol."""
        url = self.build_url(QUOTE_PATH.format(symbol=_segment(symbol)))
        return self.call_and_decode(url, QuoteResult, timeout=timeout)

    def intraday_prices(self, symbol: str, *, timeout: float | None = None) -> IntradayResult:
        """Get today's minute bars for a symbol."""
        url = self.build_url(INTRADAY_PATH.format(symbol=_segment(symbol)))
        data = self.call_and_decode(url, list[IntradayItem], timeout=timeout)
        return IntradayResult(symbol=symbol, data=data)

    def historical_prices(
        self,
        symbol: str,
        duration: Duration,
        *,
        timeout: float | None = None,
    ) -> IntradayResult:
        """Get historical price bars for a symbol over the given range."""
        url = self.build_url(HISTORICAL_PATH.format(symbol=_segment(symbol), duration=duration))
        data = self.call_and_decode(url, list[IntradayItem], timeout=timeout)
        return IntradayResult(symbol=symbol, data=data)

    def dividends(
        self,
        symbol: str,
        duration: Duration,
        *,
        timeout: float | None = None,
    ) -> DividendResults:
        """Get basic dividend events for a symbol over the given range."""
        url = self.build_url(DIVIDENDS_PATH.format(symbol=_segment(symbol), duration=duration))
        dividends = self.call_and_decode(url, list[DividendResultItem], timeout=timeout)
        return DividendResults(symbol=symbol, dividends=dividends)

    def search(self, query: str, *, timeout: float | None = None) -> SearchResults:
        """Search symbols and company names."""
        url = self.build_url(SEARCH_PATH.format(query=_segment(query)))
        results = self.call_and_decode(url, list[SearchResultItem], timeout=timeout)
        return SearchResults(search=query, results=results)

    def time_series(
        self,
        id: str,
        key: str,
        subkey: str,
        target: type[T] | Any,
        *options: QueryOption,
        timeout: float | None = None,
    ) -> T:
        """Query a time-series dataset by id/key/subkey.

        Can be used for datasets without a dedicated method by supplying
        a matching decode target. Empty key or subkey segments are dropped.
        """
        segments = [TIME_SERIES_PATH] + [_segment(s) for s in (id, key, subkey) if s]
        url = self.build_url("/".join(segments), options)
        return self.call_and_decode(url, target, timeout=timeout)

    def news(
        self,
        symbol: str,
        *options: QueryOption,
        timeout: float | None = None,
    ) -> NewsResults:
        """Get news articles for a symbol."""
        news = self.time_series("news", symbol, "", list[NewsResultItem], *options, timeout=timeout)
        return NewsResults(symbol=symbol, news=news)

    def advanced_dividends(
        self,
        symbol: str,
        *options: QueryOption,
        timeout: float | None = None,
    ) -> DividendResults:
        """Get detailed dividend events for a symbol."""
        dividends = self.time_series(
            "advanced_dividends", symbol, "", list[DividendResultItem], *options, timeout=timeout
        )
        return DividendResults(symbol=symbol, dividends=dividends)
