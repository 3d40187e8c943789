"""Data models for game-code-normalizer."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, SerializerFunctionWrapHandler, model_serializer
from pydantic.alias_generators import to_camel

from game_code_normalizer.normalization.types import CodeStatus


class CodeInput(BaseModel):
    """Structured code input with optional pass-through metadata."""

    code: Any = ""
    meta: Any = None


class NormalizeOptions(BaseModel):
    """Per-call overrides, merged onto the built-in defaults."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    min_length: int | None = None
    max_length: int | None = None
    prefixes: dict[str, str] | None = None
    keywords: dict[str, str] | None = None


class NormalizeResult(BaseModel):
    """Normalized game code with validation and classification details."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    normalized: str
    raw: str
    is_valid_format: bool
    probable_type: str
    hints: tuple[str, ...] = ()
    status: CodeStatus = "unknown"
    length: int
    created_at: datetime
    meta: Any = None

    @property
    def has_meta(self) -> bool:
        """Whether the input supplied ``meta``, even an empty or null one."""
        return "meta" in self.model_fields_set

    @model_serializer(mode="wrap")
    def serialize_without_absent_meta(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        data = handler(self)
        if not self.has_meta:
            data.pop("meta", None)
        return data

    def to_dict(self) -> dict[str, Any]:
        """Serialize with camelCase keys, JSON-compatible values."""
        return self.model_dump(mode="json", by_alias=True)

    def to_json(self, *, indent: int | None = None) -> str:
        return self.model_dump_json(by_alias=True, indent=indent)
