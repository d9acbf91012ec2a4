"""
Pydantic models for the JSON store.

This module defines the data models used throughout the package, including:
- The default open schema that accepts any JSON object
- The tagged validation result returned by schema collaborators
- API request/response models for the HTTP surface

All models use Pydantic for validation, serialization, and type safety.
"""

from __future__ import annotations

from typing import Any, Dict, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Schema Models
# ---------------------------------------------------------------------------


class LooseObject(BaseModel):
    """
    Open schema used when a store is created without one.

    Declares no fields and keeps every extra key, so any JSON object is
    accepted as-is. Anything that is not an object (a list, a string, a
    number) is rejected.
    """

    model_config = ConfigDict(extra="allow")


# ---------------------------------------------------------------------------
# Validation Results
# ---------------------------------------------------------------------------


class Valid(BaseModel):
    """
    Successful validation: ``value`` is the parsed object in JSON-native form.
    """

    success: Literal[True] = True
    value: Dict[str, Any] = Field(
        description="Parsed value, dumped to plain JSON types.",
    )


class Invalid(BaseModel):
    """
    Failed validation: ``error`` is the validator's detailed failure message.
    """

    success: Literal[False] = False
    error: str = Field(
        description="Human-readable validation failure detail.",
    )


# Tagged variant returned by Schema.safe_validate()
ValidationResult = Union[Valid, Invalid]


# ---------------------------------------------------------------------------
# API Models
# ---------------------------------------------------------------------------


class SetValueRequest(BaseModel):
    """Body of ``PUT /{key}``."""

    value: Any = Field(
        description="New value for the key. Must be JSON serializable.",
    )


class MergeValuesRequest(BaseModel):
    """Body of ``PATCH /``: every pair is merged into the stored object."""

    values: Dict[str, Any] = Field(
        default_factory=dict,
        description="Key-value pairs to merge into the stored object.",
    )


class KeyValueResponse(BaseModel):
    """Response of ``GET /{key}`` and ``PUT /{key}``."""

    key: str
    value: Any = None
