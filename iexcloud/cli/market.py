"""Market data CLI commands."""

import logging
from collections.abc import Callable
from pathlib import Path
from typing import Annotated, Optional

import httpx
import orjson
import typer
from pydantic import BaseModel, ValidationError
from rich.console import Console
from rich.logging import RichHandler

from iexcloud.config import load_config
from iexcloud.fetchers import IexCloudApiError, IexCloudClient, QueryOption
from iexcloud.fetchers.options import calendar, date_range, limit
from iexcloud.models.config import Environment, IexCloudConfig
from iexcloud.models.duration import Duration


app = typer.Typer(help="Market data commands")
console = Console()


def setup_logging(verbose: bool = False) -> None:
    """Setup logging with rich handler."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True)],
    )
    # httpx logs full request URLs, token included
    logging.getLogger("httpx").setLevel(logging.WARNING)


def create_client(config: IexCloudConfig) -> IexCloudClient:
    """Build the client used by every command."""
    return IexCloudClient.from_config(config)


def parse_range(value: str) -> Duration:
    try:
        return Duration.parse(value)
    except ValueError as e:
        raise typer.BadParameter(str(e)) from e


@app.callback()
def market(
    ctx: typer.Context,
    config_path: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="Config file (default: iexcloud/config/iexcloud.yaml)")
    ] = None,
    sandbox: Annotated[
        bool,
        typer.Option("--sandbox", help="Use the sandbox environment")
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose logging")
    ] = False,
) -> None:
    """Query IEX Cloud market data."""
    setup_logging(verbose)
    ctx.obj = {"config_path": config_path, "sandbox": sandbox}


def _load_client_config(ctx: typer.Context) -> IexCloudConfig:
    """Load the config file named by the group options."""
    options = ctx.obj or {}

    try:
        config = IexCloudConfig.from_yaml(load_config("iexcloud", path=options.get("config_path")))
    except FileNotFoundError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    except ValidationError as e:
        console.print(f"[red]Invalid configuration:[/red] {e}")
        raise typer.Exit(1)

    if options.get("sandbox"):
        config.environment = Environment.SANDBOX

    logging.getLogger(__name__).debug(f"Using config: {config.get_safe_dict()}")
    return config


def _run(ctx: typer.Context, call: Callable[[IexCloudClient], BaseModel]) -> None:
    """Run a client call and print the result as JSON."""
    logger = logging.getLogger(__name__)
    config = _load_client_config(ctx)

    try:
        with create_client(config) as client:
            result = call(client)
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted by user[/yellow]")
        raise typer.Exit(130)
    except IexCloudApiError as e:
        console.print(f"[red]API error {e.code}:[/red] {e.message}")
        raise typer.Exit(1)
    except httpx.TransportError as e:
        console.print(f"[red]Request failed:[/red] {e}")
        logger.debug("Transport error", exc_info=True)
        raise typer.Exit(1)
    except ValidationError as e:
        console.print(f"[red]Unexpected response:[/red] {e}")
        raise typer.Exit(1)

    console.print_json(orjson.dumps(result.model_dump(mode="json")).decode())


@app.command("quote")
def quote(
    ctx: typer.Context,
    symbol: Annotated[str, typer.Argument(help="Ticker symbol (e.g. AAPL)")],
) -> None:
    """Show the latest quote for a symbol."""
    _run(ctx, lambda client: client.quote(symbol))


@app.command("intraday")
def intraday(
    ctx: typer.Context,
    symbol: Annotated[str, typer.Argument(help="Ticker symbol")],
) -> None:
    """Show today's intraday price bars."""
    _run(ctx, lambda client: client.intraday_prices(symbol))


@app.command("history")
def history(
    ctx: typer.Context,
    symbol: Annotated[str, typer.Argument(help="Ticker symbol")],
    range_: Annotated[
        str,
        typer.Option("--range", "-r", help="Lookback: max, Nd, Nm or Ny")
    ] = "1m",
) -> None:
    """Show historical price bars."""
    duration = parse_range(range_)
    _run(ctx, lambda client: client.historical_prices(symbol, duration))


@app.command("dividends")
def dividends(
    ctx: typer.Context,
    symbol: Annotated[str, typer.Argument(help="Ticker symbol")],
    range_: Annotated[
        str,
        typer.Option("--range", "-r", help="Lookback: max, Nd, Nm or Ny")
    ] = "1y",
) -> None:
    """Show basic dividend events."""
    duration = parse_range(range_)
    _run(ctx, lambda client: client.dividends(symbol, duration))


@app.command("search")
def search(
    ctx: typer.Context,
    query: Annotated[str, typer.Argument(help="Symbol or company name fragment")],
) -> None:
    """Search symbols and company names."""
    _run(ctx, lambda client: client.search(query))


def _time_series_options(
    range_: str | None,
    count: int | None,
    use_calendar: bool | None = None,
) -> list[QueryOption]:
    options: list[QueryOption] = []
    if range_ is not None:
        options.append(date_range(parse_range(range_)))
    if use_calendar is not None:
        options.append(calendar(use_calendar))
    if count is not None:
        options.append(limit(count))
    return options


@app.command("news")
def news(
    ctx: typer.Context,
    symbol: Annotated[str, typer.Argument(help="Ticker symbol")],
    range_: Annotated[
        Optional[str],
        typer.Option("--range", "-r", help="Lookback: max, Nd, Nm or Ny")
    ] = None,
    count: Annotated[
        Optional[int],
        typer.Option("--limit", "-n", min=0, help="Maximum number of articles")
    ] = None,
) -> None:
    """Show news articles for a symbol."""
    options = _time_series_options(range_, count)
    _run(ctx, lambda client: client.news(symbol, *options))


@app.command("advanced-dividends")
def advanced_dividends(
    ctx: typer.Context,
    symbol: Annotated[str, typer.Argument(help="Ticker symbol")],
    range_: Annotated[
        Optional[str],
        typer.Option("--range", "-r", help="Lookback: max, Nd, Nm or Ny")
    ] = None,
    use_calendar: Annotated[
        Optional[bool],
        typer.Option("--calendar/--no-calendar", help="Treat the range as calendar dates")
    ] = None,
    count: Annotated[
        Optional[int],
        typer.Option("--limit", "-n", min=0, help="Maximum number of events")
    ] = None,
) -> None:
    """Show detailed dividend events for a symbol."""
    options = _time_series_options(range_, count, use_calendar)
    _run(ctx, lambda client: client.advanced_dividends(symbol, *options))


if __name__ == "__main__":
    app()
