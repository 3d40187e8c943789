"""Normalization engine for game codes."""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from datetime import datetime, timezone
from numbers import Number
from typing import Any

from pydantic import ValidationError

from game_code_normalizer.exceptions import ConfigError
from game_code_normalizer.normalization.patterns import (
    DEFAULT_KEYWORDS,
    DEFAULT_MAX_LENGTH,
    DEFAULT_MIN_LENGTH,
    DEFAULT_PREFIXES,
    Pattern,
    build_patterns,
    merge_patterns,
)
from game_code_normalizer.normalization.types import (
    INVALID_CHAR_HINT,
    MERR_KEYWORD_HINT,
    MERRY_EVENT_HINT,
    UNKNOWN_STATUS,
    UNKNOWN_TYPE,
)
from game_code_normalizer.schema import CodeInput, NormalizeOptions, NormalizeResult

logger = logging.getLogger(__name__)

_SEPARATORS = re.compile(r"[\s-]")
_INVALID_CHAR = re.compile(r"[^A-Z0-9]")


@dataclass(frozen=True)
class NormalizeConfig:
    min_length: int = DEFAULT_MIN_LENGTH
    max_length: int = DEFAULT_MAX_LENGTH
    prefixes: tuple[Pattern, ...] = field(default_factory=lambda: build_patterns("prefix", DEFAULT_PREFIXES))
    keywords: tuple[Pattern, ...] = field(default_factory=lambda: build_patterns("keyword", DEFAULT_KEYWORDS))


@dataclass(frozen=True)
class RawText:
    text: str


@dataclass(frozen=True)
class StructuredInput:
    code: str
    meta: Any = None
    has_meta: bool = False


ResolvedInput = RawText | StructuredInput
ConfigInput = NormalizeConfig | NormalizeOptions | Mapping[str, Any] | None


def resolve_config(config: ConfigInput = None) -> NormalizeConfig:
    """Overlay caller options onto the built-in defaults.

    Each option falls back to its default independently. Prefix and keyword
    overrides replace defaults with the same pattern text and append new ones.

    Raises:
        ConfigError: If the options do not have the expected shape.
    """
    if isinstance(config, NormalizeConfig):
        return config
    if config is None:
        return NormalizeConfig()

    if isinstance(config, NormalizeOptions):
        options = config
    elif isinstance(config, Mapping):
        try:
            options = NormalizeOptions.model_validate(dict(config))
        except ValidationError as exc:
            raise ConfigError(f"Invalid normalization options: {exc}") from exc
    else:
        raise ConfigError(f"Unsupported config type: {type(config).__name__}")

    return NormalizeConfig(
        min_length=DEFAULT_MIN_LENGTH if options.min_length is None else options.min_length,
        max_length=DEFAULT_MAX_LENGTH if options.max_length is None else options.max_length,
        prefixes=build_patterns("prefix", merge_patterns(DEFAULT_PREFIXES, options.prefixes)),
        keywords=build_patterns("keyword", merge_patterns(DEFAULT_KEYWORDS, options.keywords)),
    )


class CodeNormalizer:
    """Pattern-driven game code normalizer."""

    def __init__(self, config: ConfigInput = None):
        self.config = resolve_config(config)

    def normalize(self, value: Any) -> NormalizeResult:
        resolved = _resolve_input(value)
        raw = resolved.text if isinstance(resolved, RawText) else resolved.code

        normalized = _canonicalize(raw)
        hints: list[str] = []

        has_invalid_chars = _INVALID_CHAR.search(normalized) is not None
        if has_invalid_chars:
            hints.append(INVALID_CHAR_HINT)

        length = len(normalized)
        is_length_valid = self.config.min_length <= length <= self.config.max_length
        is_valid_format = not has_invalid_chars and is_length_valid and length > 0

        probable_type = self._classify(normalized, hints)

        fields: dict[str, Any] = {
            "normalized": normalized,
            "raw": raw,
            "is_valid_format": is_valid_format,
            "probable_type": probable_type,
            "hints": tuple(hints),
            "status": UNKNOWN_STATUS,
            "length": length,
            "created_at": _utc_now(),
        }
        if isinstance(resolved, StructuredInput) and resolved.has_meta:
            fields["meta"] = resolved.meta
        return NormalizeResult(**fields)

    def normalize_all(self, values: Any) -> list[NormalizeResult]:
        if not _is_sequence(values):
            logger.debug("batch input is not a sequence (%s), returning no results", type(values).__name__)
            return []
        return [self.normalize(value) for value in values]

    def _classify(self, normalized: str, hints: list[str]) -> str:
        probable_type: str | None = None

        for pattern in (*self.config.prefixes, *self.config.keywords):
            if not pattern.matches(normalized):
                continue
            hints.append(pattern.hint)
            if probable_type is None:
                probable_type = pattern.label

        # MERR is reported as an event hint; the label it assigned stays.
        if MERR_KEYWORD_HINT in hints:
            hints[hints.index(MERR_KEYWORD_HINT)] = MERRY_EVENT_HINT

        if probable_type is None:
            probable_type = UNKNOWN_TYPE
        logger.debug("classified %r as %s (hints=%s)", normalized, probable_type, hints)
        return probable_type


def normalize_code(value: Any, config: ConfigInput = None) -> NormalizeResult:
    """Normalize, validate and classify a single game code.

    Args:
        value: Raw code text, or a structured input (mapping, CodeInput or
            any object) with ``code`` and optional ``meta``.
        config: Optional overrides for ``minLength``, ``maxLength``,
            ``prefixes`` and ``keywords``.

    Returns:
        NormalizeResult. Malformed input never raises; it yields an invalid
        result instead.
    """

    return CodeNormalizer(config).normalize(value)


def normalize_codes(values: Any, config: ConfigInput = None) -> list[NormalizeResult]:
    """Normalize every code in an ordered sequence with the same config.

    Anything that is not a list-like sequence (including plain strings)
    yields an empty list.
    """

    if not _is_sequence(values):
        logger.debug("batch input is not a sequence (%s), returning no results", type(values).__name__)
        return []
    return CodeNormalizer(config).normalize_all(values)


def _resolve_input(value: Any) -> ResolvedInput:
    if value is None or isinstance(value, (str, Number)):
        return RawText(text=_coerce_text(value))
    if isinstance(value, CodeInput):
        return StructuredInput(
            code=_coerce_text(value.code),
            meta=value.meta,
            has_meta="meta" in value.model_fields_set,
        )
    if isinstance(value, Mapping):
        return StructuredInput(
            code=_coerce_text(value.get("code")),
            meta=value.get("meta"),
            has_meta="meta" in value,
        )
    # Any other composite (list, tuple, object) is read through attributes.
    return StructuredInput(
        code=_coerce_text(getattr(value, "code", None)),
        meta=getattr(value, "meta", None),
        has_meta=hasattr(value, "meta"),
    )


def _coerce_text(value: Any) -> str:
    if isinstance(value, str):
        return value
    if not value:
        return ""
    return str(value)


def _canonicalize(raw: str) -> str:
    return _SEPARATORS.sub("", raw.strip()).upper()


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)
