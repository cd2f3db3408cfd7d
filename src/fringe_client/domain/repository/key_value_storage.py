from abc import (
    ABC,
    abstractmethod
)
from typing import (
    Iterable,
    Mapping
)


class KeyValueStorage(ABC):
    """Durable string key/value store, the client side equivalent of ``localStorage``.

    Batch writes and removals are applied as one operation: a reader never
    observes half of a ``set_items`` call.
    """

    @abstractmethod
    def get_item(self, key: str) -> str | None:
        ...

    @abstractmethod
    def set_items(self, items: Mapping[str, str]) -> None:
        ...

    @abstractmethod
    def remove_items(self, keys: Iterable[str]) -> None:
        ...

    def set_item(self, key: str, value: str) -> None:
        self.set_items({key: value})

    def remove_item(self, key: str) -> None:
        self.remove_items([key])
