"""
Whole-document JSON storage.

Each store is a single JSON array read fully on load and replaced fully on write.
The write goes to a sibling temp file first and is swapped in with os.replace,
so a failed write leaves the previous document intact.
"""

import os
from pathlib import Path
from typing import Any

import orjson

from src.platform.exception.exceptions import StorageError
from src.platform.logging.loguru_io import Logger


class JsonDocumentStore:
    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    @property
    def _tmp_path(self) -> Path:
        return self.path.with_name(f'{self.path.name}.tmp')

    @Logger.io(truncate_content=True)
    def read(self) -> list[Any]:
        if not self.path.exists():
            Logger.base.info(f'📂 [STORE] {self.path} not found, starting empty')
            return []

        try:
            raw = self.path.read_bytes()
        except OSError as e:
            raise StorageError(f'Error reading {self.path}: {e}') from e

        if not raw.strip():
            return []

        try:
            documents = orjson.loads(raw)
        except orjson.JSONDecodeError as e:
            raise StorageError(f'Malformed JSON in {self.path}: {e}') from e

        if not isinstance(documents, list):
            raise StorageError(f'Expected a JSON array in {self.path}')
        return documents

    @Logger.io(truncate_content=True)
    def write(self, documents: list[Any]) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self._tmp_path.write_bytes(orjson.dumps(documents, option=orjson.OPT_INDENT_2))
            os.replace(self._tmp_path, self.path)
        except OSError as e:
            self._tmp_path.unlink(missing_ok=True)
            raise StorageError(f'Error saving {self.path}: {e}') from e
