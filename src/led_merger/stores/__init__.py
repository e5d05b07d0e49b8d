"""Configuration stores for loading and saving LED configurations."""

from .exceptions import (
    DocumentNotFoundError,
    InvalidDocumentError,
    StoreAPIError,
    StoreConnectionError,
    StoreError,
    StoreReadError,
    StoreWriteError,
    WriteConflictError,
)
from .file_store import FileSystemStore
from .http_store import HttpStore, HttpStoreSettings
from .memory_store import MemoryStore
from .store import ConfigurationStore

__all__ = [
    "ConfigurationStore",
    "FileSystemStore",
    "HttpStore",
    "HttpStoreSettings",
    "MemoryStore",
    "StoreError",
    "DocumentNotFoundError",
    "StoreReadError",
    "StoreWriteError",
    "WriteConflictError",
    "InvalidDocumentError",
    "StoreConnectionError",
    "StoreAPIError",
]
