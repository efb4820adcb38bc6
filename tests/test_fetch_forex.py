"""Tests for the fetch_forex CLI."""

import json
import sys

import pytest

from scripts import fetch_forex


def run_cli(monkeypatch, *argv):
    monkeypatch.setattr(sys, "argv", ["fetch-forex", *argv])
    fetch_forex.main()


class TestFetchForexCLI:
    def test_mock_exchange_rate(self, monkeypatch, capsys):
        run_cli(monkeypatch, "--function", "exchange-rate", "--from", "USD", "--to", "COP", "--mock")
        out = json.loads(capsys.readouterr().out)
        assert out["Realtime Currency Exchange Rate"]["3. To_Currency Code"] == "COP"

    def test_mock_intraday_csv(self, monkeypatch, capsys):
        run_cli(
            monkeypatch,
            "--function", "intraday", "--from", "EUR", "--to", "USD",
            "--interval", "5", "--datatype", "csv", "--mock",
        )
        assert capsys.readouterr().out.startswith("timestamp,open,high,low,close")

    @pytest.mark.parametrize("function", ["daily", "weekly", "monthly"])
    def test_mock_series(self, monkeypatch, capsys, function):
        run_cli(monkeypatch, "--function", function, "--from", "EUR", "--to", "USD", "--mock")
        out = json.loads(capsys.readouterr().out)
        assert out["Meta Data"]["3. To Symbol"] == "USD"

    def test_intraday_requires_interval(self, monkeypatch):
        with pytest.raises(SystemExit) as exc:
            run_cli(monkeypatch, "--function", "intraday", "--from", "EUR", "--to", "USD", "--mock")
        assert exc.value.code == 2

    def test_missing_api_key_exits(self, monkeypatch):
        monkeypatch.delenv("ALPHA_VANTAGE_API_KEY", raising=False)
        with pytest.raises(SystemExit) as exc:
            run_cli(monkeypatch, "--function", "daily", "--from", "EUR", "--to", "USD")
        assert exc.value.code == 1

    def test_uses_environment(self, monkeypatch, capsys):
        captured = {}

        class FakeResolver:
            def __init__(self, api_key, base_url):
                captured["api_key"] = api_key
                captured["base_url"] = base_url

            def resolve(self, operation, params, category=None):
                captured["call"] = (operation, params, category)
                return "raw"

        monkeypatch.setenv("ALPHA_VANTAGE_API_KEY", "secret")
        monkeypatch.setenv("ALPHA_VANTAGE_BASE_URL", "http://localhost:9999/query")
        monkeypatch.setattr(fetch_forex, "AlphaVantageResolver", FakeResolver)

        run_cli(monkeypatch, "--function", "weekly", "--from", "EUR", "--to", "USD", "--datatype", "json")

        assert captured["api_key"] == "secret"
        assert captured["base_url"] == "http://localhost:9999/query"
        assert captured["call"][1] == {"from_symbol": "EUR", "to_symbol": "USD", "datatype": "json"}
        assert captured["call"][2] == "FX"
        assert capsys.readouterr().out == "raw\n"
