from abc import ABCMeta, abstractmethod
from typing import List

from trendminer.common.types import StockEntry


class StockDataSource(metaclass=ABCMeta):
    def __init__(self, api_url: str):
        self.api_url = api_url

    @abstractmethod
    def get_stocks(self) -> List[StockEntry]:
        ...
