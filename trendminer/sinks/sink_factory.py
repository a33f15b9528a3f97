from trendminer.common import config
from trendminer.common.types import SinkType
from trendminer.sinks.excel import ExcelWriter, StreamingExcelWriter
from trendminer.sinks.sink_base import StockSink


def sink_factory(
    sink: SinkType = None,
    directory: str = None,
    filename: str = None,
    sheet_name: str = None,
) -> StockSink:
    _sink = sink or config.sink_type
    if _sink == SinkType.memory:
        return ExcelWriter(directory, filename, sheet_name)
    elif _sink == SinkType.streaming:
        return StreamingExcelWriter(directory, filename, sheet_name)
    else:
        raise Exception(f"unsupported sink {_sink}")
