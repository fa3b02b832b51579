"""
Key-Value Backends - raw document persistence under stable named keys
"""
import logging
import os
import tempfile
import threading
from pathlib import Path
from typing import Dict, Optional

from gearup.core.exceptions import StorageError

logger = logging.getLogger(__name__)


class KeyValueBackend:
    """
    Minimal contract the record store persists through.
    Values are serialized documents (JSON text).
    """

    def read(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def write(self, key: str, value: str) -> None:
        raise NotImplementedError

    def delete(self, key: str) -> None:
        raise NotImplementedError


class MemoryBackend(KeyValueBackend):
    """Dict-backed backend, nothing survives the process"""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})
        self._lock = threading.Lock()

    def read(self, key: str) -> Optional[str]:
        with self._lock:
            return self._data.get(key)

    def write(self, key: str, value: str) -> None:
        with self._lock:
            self._data[key] = value

    def delete(self, key: str) -> None:
        with self._lock:
            self._data.pop(key, None)


class JsonFileBackend(KeyValueBackend):
    """
    One <key>.json file per key inside data_dir.

    Writes go to a temp file in the same directory and are moved into place
    with os.replace, so readers see either the old or the new document.
    """

    def __init__(self, data_dir: str):
        self.data_dir = Path(data_dir)

    def _path(self, key: str) -> Path:
        return self.data_dir / f"{key}.json"

    def read(self, key: str) -> Optional[str]:
        path = self._path(key)
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError) as e:
            # Unreadable blob is treated like an absent one
            logger.warning(f"Could not read {path}: {e}")
            return None

    def write(self, key: str, value: str) -> None:
        path = self._path(key)
        try:
            self.data_dir.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(dir=self.data_dir, prefix=f".{key}.", suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as handle:
                    handle.write(value)
                os.replace(tmp_path, path)
            except BaseException:
                if os.path.exists(tmp_path):
                    os.unlink(tmp_path)
                raise
        except OSError as e:
            logger.error(f"Storage error writing {path}: {e}")
            raise StorageError(f"Failed to write '{key}': {e}")

    def delete(self, key: str) -> None:
        path = self._path(key)
        try:
            path.unlink()
        except FileNotFoundError:
            pass
        except OSError as e:
            logger.error(f"Storage error deleting {path}: {e}")
            raise StorageError(f"Failed to delete '{key}': {e}")
