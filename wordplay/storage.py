from __future__ import annotations
import logging
import os
import tempfile
from pathlib import Path
from typing import Dict, Optional, Union

# Durable key-value slots. Values are opaque JSON strings; callers own the format.

DICTIONARY_KEY = 'wordplay.dictionary'
USER_KEY = 'wordplay.user'

log = logging.getLogger('wordplay.storage')


class StorageError(Exception):
    """Read or write against a key-value slot failed."""


class KeyValueStore:
    def get(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def set(self, key: str, value: str) -> None:
        raise NotImplementedError


class MemoryStore(KeyValueStore):
    """In-process store, useful for tests and throwaway sessions."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})
        self.writes = 0

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value
        self.writes += 1


class JsonFileStore(KeyValueStore):
    """One ``<key>.json`` file per slot under ``data_dir``.

    Writes go to a temp file in the same directory and are swapped in with
    ``os.replace`` so a crash mid-write never leaves a torn blob behind.
    """

    def __init__(self, data_dir: Union[str, Path]):
        self.data_dir = Path(data_dir)

    def path_for(self, key: str) -> Path:
        return self.data_dir / f'{key}.json'

    def get(self, key: str) -> Optional[str]:
        path = self.path_for(key)
        if not path.exists():
            return None
        try:
            return path.read_text(encoding='utf-8')
        except (OSError, UnicodeDecodeError) as e:
            raise StorageError(f'could not read {path}') from e

    def set(self, key: str, value: str) -> None:
        path = self.path_for(key)
        try:
            self.data_dir.mkdir(parents=True, exist_ok=True)
            fd, tmp = tempfile.mkstemp(dir=self.data_dir, prefix=f'.{key}.', suffix='.tmp')
            try:
                with os.fdopen(fd, 'w', encoding='utf-8') as f:
                    f.write(value)
                os.replace(tmp, path)
            except BaseException:
                if os.path.exists(tmp):
                    os.unlink(tmp)
                raise
        except OSError as e:
            raise StorageError(f'could not write {path}') from e
        log.debug('Wrote %d bytes to %s', len(value), path)
