"""Alpha Vantage request resolvers: HTTP and mock implementations."""

import copy
import json
import logging
from abc import ABC, abstractmethod
from typing import Any

import requests

from forex.options import DataType, Operation

logger = logging.getLogger(__name__)

ALPHA_VANTAGE_BASE_URL = "https://www.alphavantage.co/query"

# Keys Alpha Vantage uses to report failures inside a 200 response
ERROR_KEYS = ("Error Message", "Note", "Information")


class AlphaVantageError(RuntimeError):
    """Raised when Alpha Vantage answers with an error or notice payload."""


def function_name(operation: Operation, category: str | None = None) -> str:
    """Map an operation to the API function name.

    >>> function_name(Operation.INTRADAY, "FX")
    'FX_INTRADAY'
    >>> function_name(Operation.CURRENCY_EXCHANGE_RATE)
    'CURRENCY_EXCHANGE_RATE'
    """
    name = Operation(operation).value.upper()
    if category:
        return f"{category}_{name}"
    return name


class Resolver(ABC):
    """Abstract interface for turning an operation into an API result."""

    @abstractmethod
    def resolve(
        self,
        operation: Operation,
        params: dict[str, str],
        category: str | None = None,
    ) -> dict[str, Any] | str:
        """Perform the request for an operation.

        Args:
            operation: Which API operation to run.
            params: Flat query parameters, already stripped of unset values.
            category: Asset-class tag (e.g. "FX"), or None.

        Returns:
            A decoded mapping, or raw text when ``params["datatype"]`` is
            "json" or "csv".
        """


class AlphaVantageResolver(Resolver):
    """Real Alpha Vantage resolver. One GET per call, no retries."""

    def __init__(
        self,
        api_key: str,
        base_url: str = ALPHA_VANTAGE_BASE_URL,
        timeout: float = 10.0,
    ):
        self._api_key = api_key
        self._base_url = base_url
        self._timeout = timeout

    def resolve(
        self,
        operation: Operation,
        params: dict[str, str],
        category: str | None = None,
    ) -> dict[str, Any] | str:
        function = function_name(operation, category)
        query = dict(params)
        datatype = DataType(query.pop("datatype", DataType.MAP))
        if datatype is not DataType.MAP:
            query["datatype"] = datatype.value
        query["function"] = function

        logger.debug("Requesting %s with %s", function, sorted(query))
        resp = requests.get(
            self._base_url,
            params={**query, "apikey": self._api_key},
            timeout=self._timeout,
        )
        logger.debug("%s answered %d", function, resp.status_code)
        resp.raise_for_status()

        if datatype is not DataType.MAP:
            return resp.text

        data = resp.json()
        for key in ERROR_KEYS:
            if isinstance(data, dict) and key in data:
                raise AlphaVantageError(f"Alpha Vantage {function}: {data[key]}")
        return data


class MockResolver(Resolver):
    """Mock resolver returning fixed payloads, recording every call."""

    MOCK_RATES = {
        ("USD", "COP"): "3130.00000000",
        ("USD", "EUR"): "0.86000000",
        ("EUR", "USD"): "1.16000000",
    }

    def __init__(self):
        self.calls: list[tuple[Operation, dict[str, str], str | None]] = []

    def resolve(
        self,
        operation: Operation,
        params: dict[str, str],
        category: str | None = None,
    ) -> dict[str, Any] | str:
        operation = Operation(operation)
        self.calls.append((operation, copy.deepcopy(params), category))

        if operation is Operation.CURRENCY_EXCHANGE_RATE:
            payload = self._exchange_rate(params["from_currency"], params["to_currency"])
        else:
            payload = self._series(operation, params)

        datatype = params.get("datatype", DataType.MAP.value)
        if datatype == DataType.CSV.value:
            return self._to_csv(payload)
        if datatype == DataType.JSON.value:
            return json.dumps(payload, indent=4)
        return payload

    def _exchange_rate(self, from_currency: str, to_currency: str) -> dict[str, Any]:
        rate = self.MOCK_RATES.get((from_currency, to_currency), "1.00000000")
        return {
            "Realtime Currency Exchange Rate": {
                "1. From_Currency Code": from_currency,
                "3. To_Currency Code": to_currency,
                "5. Exchange Rate": rate,
                "7. Time Zone": "UTC",
            }
        }

    def _series(self, operation: Operation, params: dict[str, str]) -> dict[str, Any]:
        pair = (params["from_symbol"], params["to_symbol"])
        rate = self.MOCK_RATES.get(pair, "1.00000000")[:6]
        if operation is Operation.INTRADAY:
            label = params["interval"]
        else:
            label = operation.value.capitalize()
        bar = {"1. open": rate, "2. high": rate, "3. low": rate, "4. close": rate}
        return {
            "Meta Data": {
                "2. From Symbol": pair[0],
                "3. To Symbol": pair[1],
            },
            f"Time Series FX ({label})": {"2019-02-15": bar},
        }

    @staticmethod
    def _to_csv(payload: dict[str, Any]) -> str:
        if "Realtime Currency Exchange Rate" in payload:
            body = payload["Realtime Currency Exchange Rate"]
            return "from,to,rate\r\n{},{},{}\r\n".format(
                body["1. From_Currency Code"],
                body["3. To_Currency Code"],
                body["5. Exchange Rate"],
            )
        series_key = next(k for k in payload if k.startswith("Time Series"))
        lines = ["timestamp,open,high,low,close"]
        for ts, bar in payload[series_key].items():
            lines.append(",".join([ts, *bar.values()]))
        return "\r\n".join(lines) + "\r\n"
