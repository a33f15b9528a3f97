import pytest

from trendminer.common.types import HEADERS, StockEntry


def test_from_dict_example():
    entry = StockEntry.from_dict(
        {
            "ticker": "ABC",
            "ticker_name": "Alpha",
            "latest_price": "120.5",
            "points_change": 1.2,
            "percentage_change": 0.5,
            "traded_of_mkt_cap": 3.1,
        }
    )
    assert entry.to_row() == ["ABC", "Alpha", "120.5", 1.2, 0.5, 3.1]  # nosec


def test_row_matches_header_order():
    entry = StockEntry("A", "B", "1", 2.0, 3.0, 4.0)
    assert len(entry.to_row()) == len(HEADERS)  # nosec
    assert HEADERS[0] == "Ticker"  # nosec
    assert HEADERS[-1] == "Traded Of Mkt Cap"  # nosec


def test_missing_and_null_fields_take_zero_values():
    entry = StockEntry.from_dict({"ticker": "NABIL", "points_change": None})
    assert entry == StockEntry("NABIL", "", "", 0.0, 0.0, 0.0)  # nosec


def test_integers_accepted_for_numbers():
    entry = StockEntry.from_dict({"points_change": 3, "traded_of_mkt_cap": 0})
    assert isinstance(entry.points_change, float)  # nosec
    assert entry.points_change == 3.0  # nosec


def test_extra_keys_ignored():
    entry = StockEntry.from_dict({"ticker": "X", "sector": "Banking"})
    assert entry.ticker == "X"  # nosec


def test_price_kept_as_text():
    with pytest.raises(ValueError):
        StockEntry.from_dict({"latest_price": 120.5})


@pytest.mark.parametrize("value", ["1.2", True, [1]])
def test_numeric_field_rejects_non_numbers(value):
    with pytest.raises(ValueError):
        StockEntry.from_dict({"points_change": value})


@pytest.mark.parametrize(
    "value", [10 ** 400, -(10 ** 400), float("nan"), float("inf"), -float("inf")]
)
def test_numeric_field_rejects_out_of_range(value):
    with pytest.raises(ValueError):
        StockEntry.from_dict({"traded_of_mkt_cap": value})


def test_record_must_be_object():
    with pytest.raises(ValueError):
        StockEntry.from_dict(["ABC"])  # type: ignore
