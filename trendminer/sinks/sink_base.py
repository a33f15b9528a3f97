import os
from abc import ABCMeta, abstractmethod
from typing import List

from trendminer.common import config
from trendminer.common.errors import DirectoryCreateError
from trendminer.common.tlog import tlog
from trendminer.common.types import StockEntry


class StockSink(metaclass=ABCMeta):
    def __init__(
        self,
        directory: str = None,
        filename: str = None,
        sheet_name: str = None,
    ):
        self.file_path = os.path.join(
            directory if directory is not None else config.data_dir,
            filename or config.excel_file,
        )
        self.sheet_name = sheet_name or config.sheet_name

    def _ensure_directory(self) -> None:
        directory = os.path.dirname(self.file_path)
        if not directory:
            return
        try:
            os.makedirs(directory, exist_ok=True)
        except OSError as e:
            raise DirectoryCreateError(
                f"failed to create directory {directory}: {e}"
            ) from e

    def save(self, stocks: List[StockEntry]) -> str:
        """Write `stocks` to `file_path`, replacing any existing file."""
        self._ensure_directory()
        self.write(stocks)
        tlog(f"Excel file saved at: {self.file_path}")
        return self.file_path

    @abstractmethod
    def write(self, stocks: List[StockEntry]) -> None:
        ...
