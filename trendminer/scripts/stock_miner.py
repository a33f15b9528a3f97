"""snapshot trending stocks into an Excel workbook"""
import asyncio
import os
import sys

import pygit2

from trendminer.common import config
from trendminer.common.errors import TrendMinerError
from trendminer.common.tlog import tlog, tlog_exception
from trendminer.miners.trending_stocks import TrendingStocks


def get_build_label() -> str:
    try:
        return pygit2.Repository(
            os.path.dirname(os.path.abspath(__file__))
        ).describe(describe_strategy=pygit2.GIT_DESCRIBE_TAGS)
    except (pygit2.GitError, KeyError):
        import trendminer

        return trendminer.__version__


def motd(filename: str, version: str) -> None:
    """Display welcome message"""

    print("+=-=-=-=-=-=-=-=-=-=-=-=-=-=-=-=-=-=-=-=-=-=-=-=-=-=+")
    tlog(f"{filename} {version} starting")
    print("+=-=-=-=-=-=-=-=-=-=-=-=-=-=-=-=-=-=-=-=-=-=-=-=-=-=+")
    tlog(f"API: {config.stock_api_url}")
    tlog(f"OUTPUT: {os.path.join(config.data_dir, config.excel_file)}")
    print("+=-=-=-=-=-=-=-=-=-=-=-=-=-=-=-=-=-=-=-=-=-=-=-=-=-=+")


def main_cli() -> None:
    config.build_label = get_build_label()
    config.filename = os.path.basename(__file__)
    motd(filename=config.filename, version=config.build_label)

    miner = TrendingStocks(debug=config.debug_enabled)
    try:
        asyncio.run(miner.run())
    except KeyboardInterrupt:
        tlog("stock_miner.main() - Caught KeyboardInterrupt")
        sys.exit(1)
    except TrendMinerError as e:
        tlog_exception(f"[{miner.name}]")
        tlog(f"[FATAL] {e}")
        sys.exit(1)

    tlog("*** stock_miner completed ***")


if __name__ == "__main__":
    main_cli()
