from abc import ABC, abstractmethod
from typing import Any, Dict, Mapping, Union

# Marks a value argument that was not passed at all.
MISSING: Any = object()


class KeyValueStore(ABC):
    """
    Abstract base class for a persisted, schema-validated key-value object.
    """

    @abstractmethod
    def read(self) -> Dict[str, Any]:
        """Return the whole stored object, freshly read from the backing storage."""
        pass

    @abstractmethod
    def set(self, key_or_values: Union[str, Mapping[str, Any]], value: Any = MISSING) -> None:
        """
        Set one key, or merge a mapping of key-value pairs, and persist the result.
        """
        pass

    @abstractmethod
    def get(self, key: str, *more_keys: str) -> Any:
        """
        Get the value of one key, or a dict of several keys when more are given.
        """
        pass

    @abstractmethod
    def has(self, *keys: str) -> bool:
        """Return True if every given key is present."""
        pass

    @abstractmethod
    def delete(self, *keys: str) -> bool:
        """Remove the given keys. Returns True only if all of them were present."""
        pass

    @abstractmethod
    def reset(self) -> Dict[str, Any]:
        """Overwrite the stored object with the defaults and return them."""
        pass

    @abstractmethod
    def rm(self) -> None:
        """Remove the backing storage entirely."""
        pass
