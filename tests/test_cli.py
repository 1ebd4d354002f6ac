import json
from pathlib import Path

import httpx
import pytest
from typer.testing import CliRunner

from iexcloud.cli import market
from iexcloud.cli.main import app
from iexcloud.fetchers import IexCloudClient
from iexcloud.models.config import IexCloudConfig


runner = CliRunner()


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    path = tmp_path / "iexcloud.yaml"
    path.write_text("token: pk_test\n", encoding="utf-8")
    return path


@pytest.fixture
def seen(monkeypatch: pytest.MonkeyPatch) -> list[httpx.Request]:
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        if request.url.path.endswith("/quote"):
            if "NOPE" in request.url.path:
                return httpx.Response(404, text="Unknown symbol")
            return httpx.Response(200, json={"symbol": "AAPL", "latestPrice": 180.5})
        return httpx.Response(200, json=[])

    def create_client(config: IexCloudConfig) -> IexCloudClient:
        http_client = httpx.Client(transport=httpx.MockTransport(handler))
        return IexCloudClient.from_config(config, http_client=http_client)

    monkeypatch.setattr(market, "create_client", create_client)
    return requests


def test_quote_prints_json(config_file: Path, seen: list[httpx.Request]) -> None:
    result = runner.invoke(app, ["market", "--config", str(config_file), "quote", "AAPL"])

    assert result.exit_code == 0, result.output
    payload = json.loads(result.output)
    assert payload["symbol"] == "AAPL"
    assert payload["latest_price"] == 180.5
    assert seen[0].url.host == "cloud.iexapis.com"


def test_sandbox_flag_switches_host(config_file: Path, seen: list[httpx.Request]) -> None:
    result = runner.invoke(
        app, ["market", "--config", str(config_file), "--sandbox", "history", "AAPL", "--range", "5d"]
    )

    assert result.exit_code == 0, result.output
    assert seen[0].url.host == "sandbox.iexapis.com"
    assert seen[0].url.path == "/stable/stock/AAPL/chart/5d"
    assert json.loads(result.output) == {"symbol": "AAPL", "data": []}


def test_news_passes_options_in_order(config_file: Path, seen: list[httpx.Request]) -> None:
    result = runner.invoke(
        app, ["market", "--config", str(config_file), "news", "AAPL", "--range", "1m", "--limit", "3"]
    )

    assert result.exit_code == 0, result.output
    assert str(seen[0].url).endswith("time-series/news/AAPL?token=pk_test&range=1m&limit=3")


def test_advanced_dividends_calendar_flag(config_file: Path, seen: list[httpx.Request]) -> None:
    result = runner.invoke(
        app, ["market", "--config", str(config_file), "advanced-dividends", "AAPL", "--no-calendar"]
    )

    assert result.exit_code == 0, result.output
    assert seen[0].url.params["calendar"] == "false"


def test_api_error_exits_nonzero(config_file: Path, seen: list[httpx.Request]) -> None:
    result = runner.invoke(app, ["market", "--config", str(config_file), "quote", "NOPE"])

    assert result.exit_code == 1
    assert "404" in result.output
    assert "Unknown symbol" in result.output


def test_invalid_range_is_usage_error(config_file: Path, seen: list[httpx.Request]) -> None:
    result = runner.invoke(app, ["market", "--config", str(config_file), "dividends", "AAPL", "-r", "5w"])

    assert result.exit_code == 2
    assert seen == []


def test_missing_config_exits(tmp_path: Path, seen: list[httpx.Request]) -> None:
    result = runner.invoke(app, ["market", "--config", str(tmp_path / "nope.yaml"), "search", "apple"])

    assert result.exit_code == 1
    assert "Configuration file not found" in result.output


def test_version_option() -> None:
    result = runner.invoke(app, ["--version"])

    assert result.exit_code == 0
    assert result.output.strip() == "iexcloud 0.1.0"
