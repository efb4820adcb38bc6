"""Alpha Vantage forex functions: parameter building, dispatch and resolvers."""

from forex.client import FX_CATEGORY, ForexClient, clean_params, format_interval
from forex.options import (
    DataType,
    ExchangeRateOptions,
    Operation,
    OutputSize,
    SeriesOptions,
)
from forex.resolver import (
    AlphaVantageError,
    AlphaVantageResolver,
    MockResolver,
    Resolver,
    function_name,
)

__all__ = [
    "FX_CATEGORY",
    "ForexClient",
    "clean_params",
    "format_interval",
    "DataType",
    "ExchangeRateOptions",
    "Operation",
    "OutputSize",
    "SeriesOptions",
    "AlphaVantageError",
    "AlphaVantageResolver",
    "MockResolver",
    "Resolver",
    "function_name",
]
