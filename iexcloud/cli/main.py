"""``iexcloud`` console script."""

from typing import Annotated

import typer

from iexcloud import __version__

from .market import app as market_app

app = typer.Typer(
    name="iexcloud",
    help="Query quotes, prices, dividends and news from IEX Cloud.",
    no_args_is_help=True,
)
app.add_typer(market_app, name="market")


def _print_version(value: bool) -> None:
    if value:
        typer.echo(f"iexcloud {__version__}")
        raise typer.Exit()


@app.callback()
def root(
    version: Annotated[
        bool,
        typer.Option("--version", callback=_print_version, is_eager=True, help="Show version and exit")
    ] = False,
) -> None:
    """IEX Cloud market data client."""


if __name__ == "__main__":
    app()
