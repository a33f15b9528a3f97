from typing import Dict, Optional

from trendminer.common.decorators import timeit
from trendminer.common.errors import StockFetchError, StockSaveError
from trendminer.common.tlog import tlog
from trendminer.common.types import SinkType
from trendminer.data.data_base import StockDataSource
from trendminer.data.trending import TrendingStocksData
from trendminer.miners.base import Miner
from trendminer.sinks.sink_base import StockSink
from trendminer.sinks.sink_factory import sink_factory


class TrendingStocks(Miner):
    """
    Snapshot the trending stocks list into a spreadsheet.

    `data` may override `api_url`, `timeout`, `data_dir`, `excel_file`,
    `sheet_name` and `sink` (`memory` or `streaming`); anything absent
    falls back to `trendminer.common.config`.
    """

    def __init__(
        self,
        data: Optional[Dict] = None,
        debug=False,
        source: StockDataSource = None,
        sink: StockSink = None,
    ):
        data = data or {}
        try:
            self.source = source or TrendingStocksData(
                api_url=data.get("api_url"),
                timeout=float(data["timeout"]) if "timeout" in data else None,
            )
            self.sink = sink or sink_factory(
                sink=SinkType[data["sink"]] if "sink" in data else None,
                directory=data.get("data_dir"),
                filename=data.get("excel_file"),
                sheet_name=data.get("sheet_name"),
            )
        except (KeyError, ValueError) as e:
            raise ValueError(
                f"[ERROR] Miner received invalid parameters {data}: {e}"
            ) from e
        super().__init__(name="TrendingStocks", debug=debug)

    @timeit
    async def run(self) -> bool:
        try:
            stocks = self.source.get_stocks()
        except StockFetchError as e:
            tlog(f"[ERROR] Error fetching stock data: {e}")
            raise

        if self.debug:
            tlog(f"Miner {self.name} fetched {len(stocks)} stocks")

        try:
            self.sink.save(stocks)
        except StockSaveError as e:
            tlog(f"[ERROR] Error generating Excel file: {e}")
            raise

        return True
