from abc import ABCMeta, abstractmethod


class Miner(metaclass=ABCMeta):
    def __init__(self, name: str, debug: bool = False):
        self._name = name
        self._debug = debug

    @property
    def name(self) -> str:
        return self._name

    @property
    def debug(self) -> bool:
        return self._debug

    @abstractmethod
    async def run(self) -> bool:
        pass
