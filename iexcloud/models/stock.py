"""Stock quote, price and search result models."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class IexRecord(BaseModel):
    """Base for records decoded from IEX Cloud responses.

    Attribute names are snake_case; the upstream camelCase keys are aliases.
    Fields the API omits or returns as null stay ``None`` and unknown keys
    are ignored.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class QuoteResult(IexRecord):
    """Market information snapshot for a symbol."""

    symbol: str | None = Field(default=None)
    company_name: str | None = Field(default=None)
    primary_exchange: str | None = Field(default=None)
    calculation_price: str | None = Field(default=None, description="tops, sip, previousclose or close")

    open: float | None = Field(default=None)
    open_time: int | None = Field(default=None, description="Epoch milliseconds")
    open_source: str | None = Field(default=None)
    close: float | None = Field(default=None)
    close_time: int | None = Field(default=None, description="Epoch milliseconds")
    close_source: str | None = Field(default=None)
    high: float | None = Field(default=None)
    high_time: int | None = Field(default=None)
    high_source: str | None = Field(default=None)
    low: float | None = Field(default=None)
    low_time: int | None = Field(default=None)
    low_source: str | None = Field(default=None)

    latest_price: float | None = Field(default=None)
    latest_source: str | None = Field(default=None)
    latest_time: str | None = Field(default=None)
    latest_update: int | None = Field(default=None)
    latest_volume: int | None = Field(default=None)

    iex_realtime_price: float | None = Field(default=None)
    iex_realtime_size: int | None = Field(default=None)
    iex_last_updated: int | None = Field(default=None)
    delayed_price: float | None = Field(default=None)
    delayed_price_time: int | None = Field(default=None)
    odd_lot_delayed_price: float | None = Field(default=None)
    odd_lot_delayed_price_time: int | None = Field(default=None)
    extended_price: float | None = Field(default=None)
    extended_change: float | None = Field(default=None)
    extended_change_percent: float | None = Field(default=None)
    extended_price_time: int | None = Field(default=None)

    previous_close: float | None = Field(default=None)
    previous_volume: int | None = Field(default=None)
    change: float | None = Field(default=None)
    change_percent: float | None = Field(default=None)
    volume: int | None = Field(default=None)

    iex_market_percent: float | None = Field(default=None)
    iex_volume: int | None = Field(default=None)
    avg_total_volume: int | None = Field(default=None)
    iex_bid_price: float | None = Field(default=None)
    iex_bid_size: int | None = Field(default=None)
    iex_ask_price: float | None = Field(default=None)
    iex_ask_size: int | None = Field(default=None)
    iex_open: float | None = Field(default=None)
    iex_open_time: int | None = Field(default=None)
    iex_close: float | None = Field(default=None)
    iex_close_time: int | None = Field(default=None)

    market_cap: int | None = Field(default=None)
    pe_ratio: float | None = Field(default=None)
    week52_high: float | None = Field(default=None, alias="week52High")
    week52_low: float | None = Field(default=None, alias="week52Low")
    ytd_change: float | None = Field(default=None)
    last_trade_time: int | None = Field(default=None)
    currency: str | None = Field(default=None)
    is_us_market_open: bool | None = Field(default=None, alias="isUSMarketOpen")


class IntradayItem(IexRecord):
    """A single intraday or historical price bar."""

    average: float | None = Field(default=None)
    change_over_time: float | None = Field(default=None)
    close: float | None = Field(default=None)
    date: str | None = Field(default=None, description="YYYY-MM-DD")
    high: float | None = Field(default=None)
    label: str | None = Field(default=None)
    low: float | None = Field(default=None)
    minute: str | None = Field(default=None, description="HH:MM")
    notional: float | None = Field(default=None)
    number_of_trades: int | None = Field(default=None)
    open: float | None = Field(default=None)
    volume: float | None = Field(default=None)


class IntradayResult(BaseModel):
    """Requested symbol and its price bars."""

    symbol: str
    data: list[IntradayItem] = Field(default_factory=list)


class SearchResultItem(IexRecord):
    """A single search hit."""

    cik: str | None = Field(default=None)
    currency: str | None = Field(default=None)
    exchange: str | None = Field(default=None)
    exchange_name: str | None = Field(default=None)
    exchange_suffix: str | None = Field(default=None)
    figi: str | None = Field(default=None)
    iex_id: str | None = Field(default=None)
    lei: str | None = Field(default=None)
    name: str | None = Field(default=None)
    region: str | None = Field(default=None)
    sector: str | None = Field(default=None)
    security_name: str | None = Field(default=None)
    security_type: str | None = Field(default=None)
    symbol: str | None = Field(default=None)
    type: str | None = Field(default=None)


class SearchResults(BaseModel):
    """Search string and the hits it produced."""

    search: str
    results: list[SearchResultItem] = Field(default_factory=list)
