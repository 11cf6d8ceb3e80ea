# core/storage.py

"""
String-valued key-value persistence backends.

`JsonFileStorage` keeps each key in its own file inside a directory, and `MemoryStorage`
keeps everything in a dictionary for tests and throwaway sessions. Both return None for
keys that have never been written.

Backends raise `OSError` on failure; translating failures into notifications is the
responsibility of `RecordStore`.
"""

from __future__ import annotations

import logging
import os

logger = logging.getLogger(__name__)


class MemoryStorage:

    def __init__(self, initial: dict[str, str] | None = None):
        self._items: dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)

class JsonFileStorage:
    """
    Stores each key as `<dir_path>/<key>.json`.

    The value is written verbatim; since the roster serializes itself to JSON before
    calling `set_item()`, the files are valid JSON documents on disk.
    """

    def __init__(self, dir_path: str):
        self._dir_path = dir_path

    @property
    def dir_path(self) -> str:
        return self._dir_path

    def path_for(self, key: str) -> str:
        return os.path.join(self._dir_path, f"{key}.json")

    def get_item(self, key: str) -> str | None:
        try:
            with open(self.path_for(key), "r", encoding="utf-8") as f:
                return f.read()
        except FileNotFoundError:
            return None

    def set_item(self, key: str, value: str) -> None:
        """
        Writes the value in full, replacing any previous contents.

        Notes:
            - The directory is created on first write.
            - Data is written to a temporary file and then moved into place, so an
              interrupted write never leaves a truncated payload behind.
        """
        os.makedirs(self._dir_path, exist_ok=True)

        target = self.path_for(key)
        temp = f"{target}.tmp"

        try:
            with open(temp, "w", encoding="utf-8") as f:
                f.write(value)

            os.replace(temp, target)

        except (OSError, ValueError):
            if os.path.exists(temp):
                os.remove(temp)
            raise

        logger.debug("Wrote %d characters to %s", len(value), target)

    def remove_item(self, key: str) -> None:
        try:
            os.remove(self.path_for(key))
        except FileNotFoundError:
            pass
