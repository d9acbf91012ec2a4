import copy
import json
import logging
import math
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Set, Union

from pydantic import BaseModel

from jsonstore.core.schema import Schema, as_schema
from jsonstore.domain.errors import ConfigError, SchemaError, SerializationError
from jsonstore.domain.models import Invalid, Valid, ValidationResult
from jsonstore.storage.base import MISSING, KeyValueStore

logger = logging.getLogger(__name__)

# Largest integer every JSON reader can represent exactly (IEEE-754 double).
MAX_SAFE_INTEGER = 2**53 - 1


class JsonStore(KeyValueStore):
    """
    A JSON file holding one schema-validated object.

    Nothing is cached: every operation re-reads the file, so edits made by
    other programs are always picked up. Every mutation validates the full
    result and rewrites the whole file. Unparsable or schema-invalid content
    is copied to ``<path>.bak`` and replaced with the defaults.
    """

    def __init__(
        self,
        name: str = "store.json",
        path: Optional[Union[str, Path]] = None,
        schema: Any = None,
        defaults: Optional[Union[Mapping[str, Any], BaseModel]] = None,
    ):
        if not name.endswith(".json"):
            name += ".json"

        if path is None:
            from jsonstore.core.dependencies import get_data_dir
            path = get_data_dir()

        self._path = (Path(path).expanduser() / name).resolve()
        self._schema = as_schema(schema)

        if defaults is None:
            defaults = {}
        elif isinstance(defaults, BaseModel):
            defaults = defaults.model_dump(mode="json", by_alias=True)

        result = self._schema.safe_validate(defaults)
        if isinstance(result, Invalid):
            raise ConfigError(f"Defaults do not match schema: {result.error}")
        self._defaults = result.value

    @property
    def path(self) -> Path:
        """Absolute path of the JSON file, including the file name."""
        return self._path

    @property
    def backup_path(self) -> Path:
        return Path(f"{self._path}.bak")

    @property
    def schema(self) -> Schema:
        return self._schema

    @property
    def defaults(self) -> Dict[str, Any]:
        """The validated defaults. Each access returns a fresh copy."""
        return copy.deepcopy(self._defaults)

    def read(self) -> Dict[str, Any]:
        try:
            raw = self._path.read_bytes()
        except FileNotFoundError:
            logger.debug("%s does not exist yet, creating it with the default values", self._path)
            return self.reset()

        result = self._parse(raw)
        if isinstance(result, Valid):
            return result.value

        # Single backup slot: a previous .bak is overwritten.
        backup_path = self.backup_path
        backup_path.write_bytes(raw)
        self.reset()
        logger.error(
            "Failed to parse json from %s. The file has been backed up at %s and a new "
            "json file has been created with the default values. Reason: %s",
            self._path,
            backup_path,
            result.error,
        )
        return self.defaults

    def set(self, key_or_values: Union[str, Mapping[str, Any]], value: Any = MISSING) -> None:
        if isinstance(key_or_values, Mapping):
            if value is not MISSING:
                raise TypeError("set() takes either a key and a value, or a single mapping")
            updates = dict(key_or_values)
        else:
            updates = {key_or_values: value}

        # Check everything before touching the file.
        for key, item in updates.items():
            validate_serializable(key, item)

        data = self.read()
        data.update(updates)
        self._save(data)

    def get(self, key: str, *more_keys: str) -> Any:
        """
        Return the value of ``key`` (None when absent).

        With more keys, return a dict whose first entry is always ``key``,
        followed by those of ``more_keys`` that are present, in the order given.
        """
        data = self.read()
        if not more_keys:
            return data.get(key)

        picked = {key: data.get(key)}
        for k in more_keys:
            if k in data and k not in picked:
                picked[k] = data[k]
        return picked

    def has(self, *keys: str) -> bool:
        data = self.read()
        return all(key in data for key in keys)

    def delete(self, *keys: str) -> bool:
        """
        Remove ``keys`` and save if anything was removed.

        Keys are removed one at a time, so a key listed twice is missing the
        second time and the call returns False.
        """
        data = self.read()
        remaining = dict(data)
        deleted_all = True

        for key in keys:
            if key in remaining:
                del remaining[key]
            else:
                deleted_all = False

        if len(remaining) < len(data):
            self._save(remaining)

        return deleted_all

    def reset(self) -> Dict[str, Any]:
        self._save(self._defaults)
        logger.info("Reset %s to the default values", self._path)
        return self.defaults

    def rm(self) -> None:
        self._path.unlink(missing_ok=True)

    def _parse(self, raw: bytes) -> ValidationResult:
        try:
            data = json.loads(raw.decode("utf-8"))
        except (ValueError, RecursionError) as exc:
            # JSONDecodeError, UnicodeDecodeError and nesting too deep to decode
            return Invalid(error=f"Invalid JSON: {exc}")
        return self._schema.safe_validate(data)

    def _validate(self, data: Any) -> Dict[str, Any]:
        result = self._schema.safe_validate(data)
        if isinstance(result, Invalid):
            raise SchemaError(f"Failed to save json. Data does not match schema: {result.error}")
        return result.value

    def _save(self, data: Any) -> None:
        data = self._validate(data)
        text = json.dumps(data, indent=2, ensure_ascii=False) + "\n"

        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(text, encoding="utf-8")

    def __repr__(self) -> str:
        return f"JsonStore(path={str(self._path)!r}, schema={self._schema!r})"


def validate_serializable(key: Any, value: Any) -> None:
    """
    Raise SerializationError if ``key`` is not a string or ``value`` cannot be
    written as JSON.
    """
    if not isinstance(key, str):
        raise SerializationError(repr(key), f"{type(key).__name__} key")
    if value is MISSING:
        raise SerializationError(key, "missing")

    type_name = _unsupported_type(value, set())
    if type_name is not None:
        raise SerializationError(key, type_name)


def _unsupported_type(value: Any, ancestors: Set[int]) -> Optional[str]:
    """
    Return the type name of the first non-JSON value inside ``value``, or None.

    ``ancestors`` holds the ids of the containers on the current path; meeting
    one again means the value contains itself.
    """
    if value is None or isinstance(value, (str, bool)):
        return None
    if isinstance(value, int):
        return None if abs(value) <= MAX_SAFE_INTEGER else "unsafe int"
    if isinstance(value, float):
        return None if math.isfinite(value) else "non-finite float"
    if not isinstance(value, (list, tuple, dict)):
        return type(value).__name__

    if id(value) in ancestors:
        return f"circular {type(value).__name__}"
    ancestors.add(id(value))
    try:
        if isinstance(value, dict):
            for k, item in value.items():
                if not isinstance(k, str):
                    return f"{type(k).__name__} key"
                found = _unsupported_type(item, ancestors)
                if found is not None:
                    return found
        else:
            for item in value:
                found = _unsupported_type(item, ancestors)
                if found is not None:
                    return found
        return None
    finally:
        ancestors.discard(id(value))
