from pathlib import Path
from typing import Optional
import os

from jsonstore.core.paths import get_project_root
from jsonstore.storage.json_store import JsonStore

DATA_DIR_ENV_VAR = "JSONSTORE_DIR"
STORE_NAME_ENV_VAR = "JSONSTORE_NAME"

_store: Optional[JsonStore] = None

def get_data_dir() -> Path:
    """
    Directory used by stores created without an explicit path.

    Priority:
    1. Environment variable JSONSTORE_DIR
    2. The project root of the current working directory
    """
    env_path = os.environ.get(DATA_DIR_ENV_VAR)
    if env_path:
        return Path(env_path).expanduser()
    return get_project_root()

def get_store() -> JsonStore:
    global _store
    if _store is None:
        name = os.environ.get(STORE_NAME_ENV_VAR) or "store.json"
        _store = JsonStore(name=name, path=get_data_dir())
    return _store

def reset_store_cache() -> None:
    global _store
    _store = None
