from __future__ import annotations


class JsonStoreError(Exception):
    """Base class for every error raised by the store."""


class SchemaError(JsonStoreError, ValueError):
    """
    Raised when a value about to be persisted does not match the store schema.

    The message carries the validator's own failure detail. The file on disk
    is never touched when this is raised.
    """


class ConfigError(SchemaError):
    """Raised at construction time when the defaults do not match the schema."""


class SerializationError(JsonStoreError, TypeError):
    """
    Raised by ``set`` when a value cannot be represented as JSON.

    Raised before any read or write happens.
    """

    def __init__(self, key: str, type_name: str):
        self.key = key
        self.type_name = type_name
        super().__init__(
            f"Failed to set value of type `{type_name}` for key `{key}`. "
            "Values must be JSON serializable."
        )


class ProjectRootNotFoundError(FileNotFoundError):
    """No directory between the start path and the filesystem root holds a project marker."""
