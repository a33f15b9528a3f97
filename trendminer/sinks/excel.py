import io
from typing import List

import pandas as pd
from openpyxl import Workbook
from openpyxl.cell import WriteOnlyCell

from trendminer.common.errors import FileSaveError, WorkbookWriteError
from trendminer.common.types import HEADERS, TEXT_COLUMNS, StockEntry
from trendminer.sinks.sink_base import StockSink


class ExcelWriter(StockSink):
    """Build the whole sheet as a DataFrame, then persist it in one go."""

    def to_dataframe(self, stocks: List[StockEntry]) -> pd.DataFrame:
        return pd.DataFrame(
            data=[stock.to_row() for stock in stocks], columns=list(HEADERS)
        )

    def write(self, stocks: List[StockEntry]) -> None:
        buffer = io.BytesIO()
        try:
            df = self.to_dataframe(stocks)
            with pd.ExcelWriter(buffer, engine="openpyxl") as writer:
                df.to_excel(writer, sheet_name=self.sheet_name, index=False)
                # openpyxl reads `=...` as a formula and `#N/A` as an error
                for row in writer.sheets[self.sheet_name].iter_rows(
                    min_row=2, max_col=TEXT_COLUMNS
                ):
                    for cell in row:
                        if isinstance(cell.value, str):
                            cell.data_type = "s"
        except Exception as e:
            raise WorkbookWriteError(
                f"failed to write Excel workbook: {e}"
            ) from e

        try:
            with open(self.file_path, "wb") as f:
                f.write(buffer.getvalue())
        except OSError as e:
            raise FileSaveError(f"failed to save Excel file: {e}") from e


class StreamingExcelWriter(StockSink):
    """Append rows through a write-only workbook, one entry at a time."""

    def write(self, stocks: List[StockEntry]) -> None:
        try:
            wb = Workbook(write_only=True)
            ws = wb.create_sheet(title=self.sheet_name)
            ws.append(list(HEADERS))
            for stock in stocks:
                row = stock.to_row()
                text = []
                for value in row[:TEXT_COLUMNS]:
                    cell = WriteOnlyCell(ws, value=value)
                    cell.data_type = "s"
                    text.append(cell)
                ws.append(text + row[TEXT_COLUMNS:])
        except Exception as e:
            raise WorkbookWriteError(
                f"failed to write Excel workbook: {e}"
            ) from e

        try:
            wb.save(self.file_path)
        except OSError as e:
            raise FileSaveError(f"failed to save Excel file: {e}") from e
        except Exception as e:
            raise WorkbookWriteError(
                f"failed to write Excel workbook: {e}"
            ) from e
