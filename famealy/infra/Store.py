"""Key/value blob store behind every persisted collection.

Values are JSON-serializable blobs addressed by string keys. There is no
locking and no versioning: a ``set`` replaces the whole blob and the last
writer wins. Repositories build get-all / replace-all collections on top of
this interface so a transactional store can be swapped in later.
"""
import json
import logging
import os
import shutil
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from threading import Lock
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


class KeyValueStore(ABC):

    @abstractmethod
    def get(self, key: str, default: Any = None) -> Any:
        """Return the decoded value for key, or default when missing or unreadable."""

    @abstractmethod
    def set(self, key: str, value: Any) -> None:
        """Replace the value stored under key."""

    @abstractmethod
    def remove(self, key: str) -> None:
        """Delete key; missing keys are ignored."""

    def get_list(self, key: str) -> list:
        value = self.get(key, [])
        if not isinstance(value, list):
            logger.warning(f"Expected a list under '{key}', got {type(value).__name__}. Treating as empty.")
            return []
        return value


class MemoryStore(KeyValueStore):
    """In-process store; values are kept as JSON text so reads never alias writes."""

    def __init__(self, initial: Optional[Dict[str, Any]] = None):
        self._data: Dict[str, str] = {}
        self._lock = Lock()
        for key, value in (initial or {}).items():
            self.set(key, value)

    def get(self, key, default=None):
        with self._lock:
            raw = self._data.get(key)
        if raw is None:
            return default
        try:
            return json.loads(raw)
        except json.JSONDecodeError as e:
            logger.error(f"Invalid JSON under '{key}': {e}")
            return default

    def set(self, key, value):
        raw = json.dumps(value, ensure_ascii=False)
        with self._lock:
            self._data[key] = raw

    def set_raw(self, key: str, raw: str) -> None:
        '''Store raw text as-is (used to simulate corrupt blobs).'''
        with self._lock:
            self._data[key] = raw

    def remove(self, key):
        with self._lock:
            self._data.pop(key, None)


class JsonFileStore(KeyValueStore):
    """One JSON file per key inside a directory, replaced atomically on write."""

    def __init__(self, directory: Path):
        self.directory = Path(directory)
        self.directory.mkdir(parents=True, exist_ok=True)
        self._lock = Lock()

    def _path(self, key: str) -> Path:
        return self.directory / f"{key}.json"

    def get(self, key, default=None):
        path = self._path(key)
        try:
            with open(path, 'r', encoding='utf-8') as f:
                return json.load(f)
        except FileNotFoundError:
            return default
        except json.JSONDecodeError as e:
            logger.error(f"Invalid JSON in {path.name}: {e}. Returning default.")
            return default
        except OSError as e:
            logger.error(f"Error reading {path.name}: {e}")
            return default

    def set(self, key, value):
        path = self._path(key)
        with self._lock:
            fd, tmp_path = tempfile.mkstemp(dir=str(self.directory), prefix=f".{key}_", suffix=".json")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as tmp:
                    json.dump(value, tmp, indent=2, ensure_ascii=False)
                shutil.move(tmp_path, path)
            finally:
                if os.path.exists(tmp_path):
                    os.remove(tmp_path)

    def remove(self, key):
        with self._lock:
            try:
                self._path(key).unlink()
            except FileNotFoundError:
                pass
