"""
Key-Value Store Capability

The only storage capability FOLIO needs: get/set/remove raw bytes by flat
string key. Writes are synchronous, last writer wins, no transactions.

Implementations:
- InMemoryStore: process-local dict, used by tests and embedding callers
- FileStore: one file per key inside a directory (FOLIO_STORE_PATH by default)
"""

import os
import re
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, List, Optional

from dotenv import load_dotenv

from folio.contexts.persistence.exceptions import InvalidStoreKeyError

load_dotenv()
STORE_PATH = Path(os.getenv("FOLIO_STORE_PATH", "outs/store"))

# Flat identifiers only, so keys map safely onto file names
VALID_KEY_PATTERN = r"[A-Za-z0-9_.\-]+"


def validate_key(key: str) -> str:
    """
    Check that a key is a flat identifier.

    Raises:
        InvalidStoreKeyError: If key is empty, contains path separators, or is "." / ".."
    """
    if not isinstance(key, str) or not re.fullmatch(VALID_KEY_PATTERN, key) or key in (".", ".."):
        raise InvalidStoreKeyError(key)
    return key


class KeyValueStore(ABC):
    """Abstract byte store keyed by flat string identifiers."""

    @abstractmethod
    def get(self, key: str) -> Optional[bytes]:
        """Return the stored bytes, or None if the key is absent."""

    @abstractmethod
    def set(self, key: str, value: bytes) -> None:
        """Store bytes under key, replacing any previous value."""

    @abstractmethod
    def remove(self, key: str) -> None:
        """Delete key; removing an absent key is a no-op."""

    def has(self, key: str) -> bool:
        return self.get(key) is not None


class InMemoryStore(KeyValueStore):
    def __init__(self, initial: Dict[str, bytes] = None):
        self._data: Dict[str, bytes] = {}
        for key, value in (initial or {}).items():
            self.set(key, value)

    def get(self, key: str) -> Optional[bytes]:
        return self._data.get(validate_key(key))

    def set(self, key: str, value: bytes) -> None:
        self._data[validate_key(key)] = bytes(value)

    def remove(self, key: str) -> None:
        self._data.pop(validate_key(key), None)

    def keys(self) -> List[str]:
        return sorted(self._data)


class FileStore(KeyValueStore):
    """
    Directory-backed store: each key is one file holding the raw bytes.

    The directory is created on first write.
    """

    def __init__(self, root: Path = None):
        """
        Args:
            root: Directory holding one file per key. Defaults to FOLIO_STORE_PATH
        """
        if root is None:
            root = STORE_PATH
        self.root = Path(root)

    def path_for(self, key: str) -> Path:
        return self.root / validate_key(key)

    def get(self, key: str) -> Optional[bytes]:
        path = self.path_for(key)
        if not path.is_file():
            return None
        return path.read_bytes()

    def set(self, key: str, value: bytes) -> None:
        path = self.path_for(key)
        self.root.mkdir(parents=True, exist_ok=True)
        path.write_bytes(bytes(value))

    def remove(self, key: str) -> None:
        path = self.path_for(key)
        if path.is_file():
            path.unlink()

    def keys(self) -> List[str]:
        if not self.root.is_dir():
            return []
        return sorted(p.name for p in self.root.iterdir() if p.is_file())
