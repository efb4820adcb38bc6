"""Forex operations of the Alpha Vantage API: parameter building and dispatch."""

import logging
from typing import Any

from forex.options import (
    DataType,
    ExchangeRateOptions,
    Operation,
    OutputSize,
    SeriesOptions,
)
from forex.resolver import Resolver

logger = logging.getLogger(__name__)

FX_CATEGORY = "FX"


def clean_params(params: dict[str, Any]) -> dict[str, Any]:
    """Drop entries whose value is None."""
    return {key: value for key, value in params.items() if value is not None}


def format_interval(interval: int) -> str:
    """Render an interval in minutes the way the API expects, e.g. 5 -> "5min"."""
    if isinstance(interval, bool) or not isinstance(interval, int):
        raise TypeError(f"interval must be an int, got {type(interval).__name__}")
    return f"{interval}min"


def _require_str(name: str, value: Any) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a str, got {type(value).__name__}")
    return value


def _options(options, options_type, **settings):
    """Return ``options``, or build one of ``options_type`` from keyword settings."""
    if options is None:
        return options_type(**settings)
    if any(value is not None for value in settings.values()):
        raise TypeError("pass either an options object or keyword settings, not both")
    if not isinstance(options, options_type):
        raise TypeError(
            f"options must be {options_type.__name__}, got {type(options).__name__}"
        )
    return options


class ForexClient:
    """Builds request parameters for the forex functions and hands them to a resolver.

    Every method returns whatever the resolver returns: a decoded mapping by
    default, or raw text when ``datatype`` is "json" or "csv". Settings the
    caller does not pass are left out of the request, so the remote API's own
    defaults apply.

    Args:
        resolver: Performs the actual request.
        category: Asset-class tag attached to the time-series calls.
    """

    def __init__(self, resolver: Resolver, category: str = FX_CATEGORY):
        self._resolver = resolver
        self._category = category

    @property
    def category(self) -> str:
        return self._category

    def exchange_rate(
        self,
        from_currency: str,
        to_currency: str,
        options: ExchangeRateOptions | None = None,
        *,
        datatype: DataType | str | None = None,
    ) -> dict[str, Any] | str:
        """Realtime exchange rate for a pair of digital or physical currencies.

        Args:
            from_currency: e.g. "USD" or "BTC".
            to_currency: e.g. "COP".
            options: Explicit settings; mutually exclusive with ``datatype``.
            datatype: map, json or csv.
        """
        opts = _options(options, ExchangeRateOptions, datatype=datatype)
        params = clean_params(
            {
                "from_currency": _require_str("from_currency", from_currency),
                "to_currency": _require_str("to_currency", to_currency),
                **opts.to_params(),
            }
        )
        return self._dispatch(Operation.CURRENCY_EXCHANGE_RATE, params, None)

    spot_rate = exchange_rate

    def intraday(
        self,
        from_symbol: str,
        to_symbol: str,
        interval: int,
        options: SeriesOptions | None = None,
        *,
        outputsize: OutputSize | str | None = None,
        datatype: DataType | str | None = None,
    ) -> dict[str, Any] | str:
        """Intraday time series of a currency pair.

        Args:
            from_symbol: Three letter currency code, e.g. "EUR".
            to_symbol: Three letter currency code, e.g. "USD".
            interval: Minutes between data points, e.g. 5.
        """
        opts = _options(options, SeriesOptions, outputsize=outputsize, datatype=datatype)
        params = clean_params(
            {
                **self._pair(from_symbol, to_symbol),
                "interval": format_interval(interval),
                **opts.to_params(),
            }
        )
        return self._dispatch(Operation.INTRADAY, params, self._category)

    def daily(
        self,
        from_symbol: str,
        to_symbol: str,
        options: SeriesOptions | None = None,
        *,
        outputsize: OutputSize | str | None = None,
        datatype: DataType | str | None = None,
    ) -> dict[str, Any] | str:
        """Daily time series of a currency pair."""
        return self._series(
            Operation.DAILY, from_symbol, to_symbol, options, outputsize, datatype
        )

    def weekly(
        self,
        from_symbol: str,
        to_symbol: str,
        options: SeriesOptions | None = None,
        *,
        outputsize: OutputSize | str | None = None,
        datatype: DataType | str | None = None,
    ) -> dict[str, Any] | str:
        """Weekly time series of a currency pair."""
        return self._series(
            Operation.WEEKLY, from_symbol, to_symbol, options, outputsize, datatype
        )

    def monthly(
        self,
        from_symbol: str,
        to_symbol: str,
        options: SeriesOptions | None = None,
        *,
        outputsize: OutputSize | str | None = None,
        datatype: DataType | str | None = None,
    ) -> dict[str, Any] | str:
        """Monthly time series of a currency pair."""
        return self._series(
            Operation.MONTHLY, from_symbol, to_symbol, options, outputsize, datatype
        )

    def _series(self, operation, from_symbol, to_symbol, options, outputsize, datatype):
        opts = _options(options, SeriesOptions, outputsize=outputsize, datatype=datatype)
        params = clean_params({**self._pair(from_symbol, to_symbol), **opts.to_params()})
        return self._dispatch(operation, params, self._category)

    @staticmethod
    def _pair(from_symbol: str, to_symbol: str) -> dict[str, str]:
        return {
            "from_symbol": _require_str("from_symbol", from_symbol),
            "to_symbol": _require_str("to_symbol", to_symbol),
        }

    def _dispatch(
        self, operation: Operation, params: dict[str, str], category: str | None
    ) -> dict[str, Any] | str:
        logger.debug("Dispatching %s with %s", operation.value, sorted(params))
        if category is None:
            return self._resolver.resolve(operation, params)
        return self._resolver.resolve(operation, params, category)
