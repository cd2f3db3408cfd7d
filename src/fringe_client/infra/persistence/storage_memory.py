from typing import (
    Iterable,
    Mapping
)

from fringe_client.domain.repository.key_value_storage import KeyValueStorage


class MemoryStorage(KeyValueStorage):
    def __init__(self):
        self.__items: dict[str, str] = {}

        super().__init__()

    def get_item(self, key: str) -> str | None:
        return self.__items.get(key)

    def set_items(self, items: Mapping[str, str]) -> None:
        self.__items.update(items)

    def remove_items(self, keys: Iterable[str]) -> None:
        for key in keys:
            self.__items.pop(key, None)

    def keys(self) -> list[str]:
        return list(self.__items)
