import math
from dataclasses import astuple, dataclass
from enum import Enum
from typing import Any, Dict, List, Tuple


class SinkType(Enum):
    memory = 1
    streaming = 2


HEADERS: Tuple[str, ...] = (
    "Ticker",
    "Ticker Name",
    "Latest Price",
    "Points Change",
    "Percentage Change",
    "Traded Of Mkt Cap",
)

_TEXT_FIELDS = ("ticker", "ticker_name", "latest_price")
_NUMERIC_FIELDS = ("points_change", "percentage_change", "traded_of_mkt_cap")

# leading columns holding text cells
TEXT_COLUMNS: int = len(_TEXT_FIELDS)


@dataclass
class StockEntry:
    ticker: str
    ticker_name: str
    latest_price: str
    points_change: float
    percentage_change: float
    traded_of_mkt_cap: float

    @classmethod
    def from_dict(cls, record: Dict[str, Any]) -> "StockEntry":
        """
        Build an entry from one decoded JSON object. Absent or null
        fields take the zero value of their type, extra keys are ignored.
        """
        if not isinstance(record, dict):
            raise ValueError(
                f"stock entry must be an object, got {type(record).__name__}"
            )

        values: Dict[str, Any] = {}
        for name in _TEXT_FIELDS:
            value = record.get(name)
            if value is None:
                value = ""
            elif not isinstance(value, str):
                raise ValueError(
                    f"field `{name}` expected string, got {value!r}"
                )
            values[name] = value

        for name in _NUMERIC_FIELDS:
            value = record.get(name)
            if value is None:
                value = 0.0
            elif isinstance(value, bool) or not isinstance(
                value, (int, float)
            ):
                raise ValueError(
                    f"field `{name}` expected number, got {value!r}"
                )
            try:
                value = float(value)
            except OverflowError as e:
                raise ValueError(
                    f"field `{name}` out of range, got {value!r}"
                ) from e
            if not math.isfinite(value):
                raise ValueError(
                    f"field `{name}` expected finite number, got {value!r}"
                )
            values[name] = value

        return cls(**values)

    def to_row(self) -> List[Any]:
        return list(astuple(self))
