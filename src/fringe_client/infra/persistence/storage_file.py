import json
import logging
import os

from pathlib import Path
from typing import (
    Iterable,
    Mapping
)

from fringe_client.domain.repository.key_value_storage import KeyValueStorage

logger = logging.getLogger("fringe_client.storage")


class FileStorage(KeyValueStorage):
    """Key/value entries kept as one JSON object in a file.

    Every write replaces the file through a temporary sibling, so a crash in the
    middle of ``set_items`` leaves either the old or the new content on disk.
    """

    def __init__(self, path: str):
        self.path = Path(path)

        super().__init__()

    def load(self) -> dict[str, str]:
        if not self.path.exists():
            return {}

        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning("Ignoring unreadable storage file %s: %s", self.path, e)
            return {}

        if not isinstance(data, dict):
            logger.warning("Ignoring storage file %s: expected a JSON object", self.path)
            return {}

        return {str(k): v for k, v in data.items() if isinstance(v, str)}

    def save(self, items: Mapping[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)

        tmp = self.path.with_name(self.path.name + ".tmp")
        tmp.write_text(
            json.dumps(dict(items), ensure_ascii=False, indent=2),
            encoding="utf-8"
        )
        os.replace(tmp, self.path)

    def get_item(self, key: str) -> str | None:
        return self.load().get(key)

    def set_items(self, items: Mapping[str, str]) -> None:
        data = self.load()
        data.update(items)

        self.save(data)

    def remove_items(self, keys: Iterable[str]) -> None:
        data = self.load()
        removed = [key for key in keys if data.pop(key, None) is not None]

        if removed:
            self.save(data)
