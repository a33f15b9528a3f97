class TrendMinerError(Exception):
    pass


class StockFetchError(TrendMinerError):
    pass


class StockHTTPError(StockFetchError):
    def __init__(self, status_code: int, text: str = ""):
        self.status_code = status_code
        self.text = text
        super().__init__(
            f"API request failed with status code: {status_code}"
        )


class StockDecodeError(StockFetchError, ValueError):
    pass


class StockSaveError(TrendMinerError):
    pass


class DirectoryCreateError(StockSaveError):
    pass


class WorkbookWriteError(StockSaveError):
    pass


class FileSaveError(StockSaveError):
    pass
