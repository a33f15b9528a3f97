from typing import Any, List, Optional

import requests

from trendminer.common import config
from trendminer.common.errors import (StockDecodeError, StockFetchError,
                                      StockHTTPError)
from trendminer.common.tlog import tlog
from trendminer.common.types import StockEntry
from trendminer.data.data_base import StockDataSource


class TrendingStocksData(StockDataSource):
    """
    Trending stocks snapshot, as published by the `smtm` home API.

    The endpoint returns `{"response": [ {...}, ... ]}` with one object
    per ticker. A single GET is issued per call, nothing is retried.
    """

    def __init__(
        self,
        api_url: str = None,
        timeout: Optional[float] = None,
        session: requests.Session = None,
    ):
        self.timeout = (
            timeout if timeout is not None else config.request_timeout
        )
        self._http = session or requests
        super().__init__(api_url=api_url or config.stock_api_url)

    def _get(self) -> requests.Response:
        try:
            return self._http.get(
                self.api_url,
                headers={"Accept": "application/json"},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise StockFetchError(f"failed to fetch stock data: {e}") from e

    def get_stocks(self) -> List[StockEntry]:
        response = self._get()
        try:
            if response.status_code != 200:
                raise StockHTTPError(response.status_code, response.text)

            try:
                payload = response.json()
            except ValueError as e:
                raise StockDecodeError(
                    f"failed to decode JSON response: {e}"
                ) from e
        finally:
            response.close()

        stocks = self.parse_response(payload)
        if config.debug_enabled:
            tlog(f"received {len(stocks)} entries from {self.api_url}")
        return stocks

    @staticmethod
    def parse_response(payload: Any) -> List[StockEntry]:
        if not isinstance(payload, dict):
            raise StockDecodeError(
                f"failed to decode JSON response: expected object, got {type(payload).__name__}"
            )

        records = payload.get("response")
        if records is None:
            return []
        if not isinstance(records, list):
            raise StockDecodeError(
                f"failed to decode JSON response: `response` is {type(records).__name__}, expected list"
            )

        try:
            return [StockEntry.from_dict(record) for record in records]
        except ValueError as e:
            raise StockDecodeError(
                f"failed to decode JSON response: {e}"
            ) from e
