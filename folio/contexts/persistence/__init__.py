"""
Persistence Context

Responsibilities:
- Defines the key-value byte store capability (get/set/remove by flat key)
- Provides in-memory and directory-backed store implementations
- Loads and saves the resume document and template choice, always through the normalizer

Owns: Storage keys, wire encoding, recovery from unreadable stored data
Never: Interprets resume content beyond normalization
"""

from folio.contexts.persistence.exceptions import InvalidStoreKeyError, UnknownTemplateError
from folio.contexts.persistence.resume_store import (
    ResumeStore,
    deserialize_resume,
    serialize_resume,
)
from folio.contexts.persistence.storage import FileStore, InMemoryStore, KeyValueStore

__all__ = [
    # Store capability
    "KeyValueStore",
    "InMemoryStore",
    "FileStore",
    # Resume records
    "ResumeStore",
    "serialize_resume",
    "deserialize_resume",
    # Errors
    "InvalidStoreKeyError",
    "UnknownTemplateError",
]
