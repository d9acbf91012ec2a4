"""
File-backed key-value store persisting one schema-validated JSON object.

This package is responsible for:
* Reading, validating and writing the store file (``JsonStore``).
* Recovering from corrupt content by backing it up and resetting to defaults.
* Resolving default storage locations (project root, OS config directory).
* Optionally exposing a store over HTTP (``jsonstore.api``).
"""

from jsonstore.core.paths import get_os_config_dir, get_project_root
from jsonstore.core.schema import AdapterSchema, ModelSchema, Schema
from jsonstore.domain.errors import (
    ConfigError,
    JsonStoreError,
    ProjectRootNotFoundError,
    SchemaError,
    SerializationError,
)
from jsonstore.storage.base import KeyValueStore
from jsonstore.storage.json_store import JsonStore

__all__ = [
    "AdapterSchema",
    "ConfigError",
    "JsonStore",
    "JsonStoreError",
    "KeyValueStore",
    "ModelSchema",
    "ProjectRootNotFoundError",
    "Schema",
    "SchemaError",
    "SerializationError",
    "get_os_config_dir",
    "get_project_root",
]
