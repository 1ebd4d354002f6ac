"""News and dividend event models."""

from pydantic import BaseModel, Field

from .stock import IexRecord


class NewsResultItem(IexRecord):
    """A single news article."""

    datetime: int | None = Field(default=None, description="Publish time, epoch milliseconds")
    has_paywall: bool | None = Field(default=None)
    headline: str | None = Field(default=None)
    image: str | None = Field(default=None)
    image_url: str | None = Field(default=None)
    lang: str | None = Field(default=None)
    provider: str | None = Field(default=None)
    qm_url: str | None = Field(default=None)
    related: str | None = Field(default=None, description="Comma-delimited related symbols")
    source: str | None = Field(default=None)
    summary: str | None = Field(default=None)
    url: str | None = Field(default=None)


class NewsResults(BaseModel):
    """Requested symbol and its news."""

    symbol: str
    news: list[NewsResultItem] = Field(default_factory=list)


class DividendResultItem(IexRecord):
    """A single dividend event.

    Shared by the basic and advanced dividends endpoints. Fields after
    ``record_date`` are only populated by advanced dividends.
    """

    amount: float | None = Field(default=None)
    currency: str | None = Field(default=None)
    declared_date: str | None = Field(default=None)
    description: str | None = Field(default=None)
    ex_date: str | None = Field(default=None)
    flag: str | None = Field(default=None)
    frequency: str | None = Field(default=None)
    payment_date: str | None = Field(default=None)
    record_date: str | None = Field(default=None)

    security_type: str | None = Field(default=None)
    notes: str | None = Field(default=None)
    figi: str | None = Field(default=None)
    last_updated: str | None = Field(default=None)
    country_code: str | None = Field(default=None)
    par_value: float | None = Field(default=None)
    par_value_currency: str | None = Field(default=None)
    net_amount: float | None = Field(default=None)
    gross_amount: float | None = Field(default=None)
    marker: str | None = Field(default=None)
    tax_rate: float | None = Field(default=None)
    from_factor: float | None = Field(default=None)
    to_factor: float | None = Field(default=None)
    adr_fee: float | None = Field(default=None)
    coupon: float | None = Field(default=None)
    declared_currency_cd: str | None = Field(default=None, alias="declaredCurrencyCD")
    declared_gross_amount: float | None = Field(default=None)
    is_net_investment_income: bool | None = Field(default=None)
    is_dap: bool | None = Field(default=None, alias="isDAP")
    is_approximate: bool | None = Field(default=None)
    fx_date: str | None = Field(default=None)
    second_payment_date: str | None = Field(default=None)
    second_ex_date: str | None = Field(default=None)
    fiscal_year_end_date: str | None = Field(default=None)
    period_end_date: str | None = Field(default=None)
    optional_election_date: str | None = Field(default=None)
    to_date: str | None = Field(default=None)
    registration_deadline: str | None = Field(default=None)
    installment_pay_date: str | None = Field(default=None)
    # Numeric from /dividends, string from advanced_dividends.
    refid: int | str | None = Field(default=None)
    created: str | None = Field(default=None)


class DividendResults(BaseModel):
    """Requested symbol and its dividend events."""

    symbol: str
    dividends: list[DividendResultItem] = Field(default_factory=list)
