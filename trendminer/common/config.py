import os
from typing import Optional

from trendminer.common.types import SinkType

#
# Trending stocks API
#
stock_api_url: str = os.getenv(
    "STOCK_API_URL", "https://www.onlinekhabar.com/smtm/home/trending"
)
request_timeout: Optional[float] = (
    float(os.getenv("STOCK_API_TIMEOUT", ""))
    if len(os.getenv("STOCK_API_TIMEOUT", "")) > 0
    else None
)

#
# Spreadsheet output
#
data_dir: str = (
    os.getenv("STOCK_DATA_DIR", "data")
    if len(os.getenv("STOCK_DATA_DIR", "data")) > 0
    else "data"
)
excel_file: str = os.getenv("STOCK_EXCEL_FILE", "stock_data.xlsx")
sheet_name: str = "Stock Data"
sink_type: SinkType = SinkType[os.getenv("STOCK_SINK", "memory")]  # type: ignore

# Debugging & Logging
debug_enabled = bool(int(os.getenv("TRENDMINER_DEBUG_ENABLED", 0)))
gcp_logger = bool(int(os.getenv("GCP_STACKDRIVER", 0)))

#
# Shared data
#
build_label: str = ""
filename: str
