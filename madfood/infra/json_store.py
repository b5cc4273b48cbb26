"""JSON document store: one file per collection, atomic writes.

Stands in for the hosted database. Read failures raise DataServiceError so callers
never render a partial aggregate.
"""
import json
import logging
import os
import shutil
import tempfile
from pathlib import Path
from threading import RLock
from typing import Any, Dict, List

from madfood.infra.paths import collection_path
from madfood.utilities.errors import DataServiceError

logger = logging.getLogger(__name__)


class JsonStore:
    def __init__(self, data_dir):
        self.data_dir = Path(data_dir)
        # Guards read-modify-write sequences inside one process
        self.lock = RLock()

    def _path(self, file_name: str) -> Path:
        return collection_path(self.data_dir, file_name)

    def load_rows(self, file_name: str) -> List[Dict[str, Any]]:
        data = self._load(file_name, default=[])
        if not isinstance(data, list):
            raise DataServiceError(file_name, "expected a list of rows")
        return [row for row in data if isinstance(row, dict)]

    def load_document(self, file_name: str) -> Dict[str, Any]:
        data = self._load(file_name, default={})
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise DataServiceError(file_name, "expected an object")
        return data

    def _load(self, file_name: str, default):
        path = self._path(file_name)
        if not path.exists():
            return default
        try:
            with open(path, 'r', encoding='utf-8') as f:
                return json.load(f)
        except json.JSONDecodeError as e:
            logger.error("Invalid JSON in %s: %s", path, e)
            raise DataServiceError(file_name, f"invalid JSON: {e}") from e
        except OSError as e:
            logger.error("Failed to read %s: %s", path, e)
            raise DataServiceError(file_name, f"read failed: {e}") from e

    def save(self, file_name: str, data: Any) -> None:
        path = self._path(file_name)
        try:
            os.makedirs(path.parent, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(dir=str(path.parent), prefix=f".{path.stem}_", suffix=".json")
            try:
                with os.fdopen(fd, 'w', encoding='utf-8') as tmp:
                    json.dump(data, tmp, indent=2, ensure_ascii=False)
                shutil.move(tmp_path, path)
            finally:
                if os.path.exists(tmp_path):
                    os.remove(tmp_path)
        except OSError as e:
            logger.error("Failed to write %s: %s", path, e)
            raise DataServiceError(file_name, f"write failed: {e}") from e
