"""Operation identifiers and optional request settings."""

from dataclasses import dataclass
from enum import Enum


class Operation(str, Enum):
    """Forex operations understood by a resolver."""

    CURRENCY_EXCHANGE_RATE = "currency_exchange_rate"
    INTRADAY = "intraday"
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"


class OutputSize(str, Enum):
    """COMPACT returns the latest 100 data points, FULL the whole series."""

    COMPACT = "compact"
    FULL = "full"


class DataType(str, Enum):
    """Response format: decoded mapping, raw JSON text, or raw CSV text."""

    MAP = "map"
    JSON = "json"
    CSV = "csv"


@dataclass(frozen=True)
class ExchangeRateOptions:
    """Optional settings for the realtime exchange rate.

    Unset fields stay None and are left out of the request entirely.
    """

    datatype: DataType | None = None

    def __post_init__(self):
        if self.datatype is not None:
            object.__setattr__(self, "datatype", DataType(self.datatype))

    def to_params(self) -> dict[str, str | None]:
        return {"datatype": _value(self.datatype)}


@dataclass(frozen=True)
class SeriesOptions:
    """Optional settings for the intraday/daily/weekly/monthly series."""

    outputsize: OutputSize | None = None
    datatype: DataType | None = None

    def __post_init__(self):
        if self.outputsize is not None:
            object.__setattr__(self, "outputsize", OutputSize(self.outputsize))
        if self.datatype is not None:
            object.__setattr__(self, "datatype", DataType(self.datatype))

    def to_params(self) -> dict[str, str | None]:
        return {
            "outputsize": _value(self.outputsize),
            "datatype": _value(self.datatype),
        }


def _value(option: Enum | None) -> str | None:
    return None if option is None else option.value
