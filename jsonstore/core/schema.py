"""
Schema collaborators for the JSON store.

A schema turns arbitrary input into a JSON-native ``dict`` or explains why it
cannot. The store only ever calls ``safe_validate()`` and inspects the tagged
result, so any validation engine can be plugged in by subclassing ``Schema``.
Two pydantic-backed implementations ship here.
"""

from __future__ import annotations

import inspect
from abc import ABC, abstractmethod
from typing import Any, Literal, Optional, Type

from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError

from jsonstore.domain.models import Invalid, LooseObject, Valid, ValidationResult

ExtraMode = Literal["allow", "ignore", "forbid"]


class Schema(ABC):
    """
    Abstract validation contract consumed by the store.
    """

    @abstractmethod
    def safe_validate(self, raw: Any) -> ValidationResult:
        """
        Validate ``raw`` without raising.

        Returns ``Valid`` holding the parsed value dumped to JSON types, or
        ``Invalid`` holding a detailed error message.
        """
        pass


class ModelSchema(Schema):
    """
    Validate against a pydantic ``BaseModel`` subclass.

    ``extra`` overrides the model's policy for keys it does not declare:
    "allow" keeps them, "ignore" drops them, "forbid" rejects the object.
    ``strict`` disables pydantic's lax coercion (``"1"`` is no longer an int).
    """

    def __init__(
        self,
        model: Type[BaseModel],
        extra: Optional[ExtraMode] = None,
        strict: bool = False,
    ):
        if extra is not None:
            model = type(
                model.__name__,
                (model,),
                {"model_config": ConfigDict(extra=extra), "__module__": model.__module__},
            )
        self.model = model
        self.strict = strict

    @classmethod
    def loose(cls) -> "ModelSchema":
        """Schema accepting any JSON object."""
        return cls(LooseObject)

    def safe_validate(self, raw: Any) -> ValidationResult:
        try:
            parsed = self.model.model_validate(raw, strict=self.strict)
        except ValidationError as exc:
            return Invalid(error=str(exc))
        return Valid(value=parsed.model_dump(mode="json", by_alias=True))

    def __repr__(self) -> str:
        return f"ModelSchema({self.model.__name__}, strict={self.strict})"


class AdapterSchema(Schema):
    """
    Validate against any type pydantic's ``TypeAdapter`` understands,
    e.g. ``Dict[str, int]`` or a ``TypedDict``.

    The validated value must dump to a JSON object.
    """

    def __init__(self, type_: Any, strict: bool = False):
        self.adapter = TypeAdapter(type_)
        self.strict = strict

    def safe_validate(self, raw: Any) -> ValidationResult:
        try:
            parsed = self.adapter.validate_python(raw, strict=self.strict)
        except ValidationError as exc:
            return Invalid(error=str(exc))

        value = self.adapter.dump_python(parsed, mode="json", by_alias=True)
        if not isinstance(value, dict):
            return Invalid(error=f"Expected a JSON object, got {type(value).__name__}")
        return Valid(value=value)


def as_schema(schema: Any) -> Schema:
    """
    Coerce what the store constructor accepts into a ``Schema``.

    Accepts a ``Schema`` instance, a ``BaseModel`` subclass, or None for the
    loose default.
    """
    if schema is None:
        return ModelSchema.loose()
    if isinstance(schema, Schema):
        return schema
    if inspect.isclass(schema) and issubclass(schema, BaseModel):
        return ModelSchema(schema)
    raise TypeError(
        f"Unsupported schema {schema!r}: expected a Schema or a pydantic BaseModel subclass"
    )
