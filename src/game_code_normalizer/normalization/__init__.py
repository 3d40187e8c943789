"""Normalization utilities for game-code-normalizer."""

from game_code_normalizer.normalization.engine import (
    CodeNormalizer,
    NormalizeConfig,
    normalize_code,
    normalize_codes,
    resolve_config,
)
from game_code_normalizer.normalization.patterns import DEFAULT_KEYWORDS, DEFAULT_PREFIXES, Pattern

__all__ = [
    "CodeNormalizer",
    "DEFAULT_KEYWORDS",
    "DEFAULT_PREFIXES",
    "NormalizeConfig",
    "Pattern",
    "normalize_code",
    "normalize_codes",
    "resolve_config",
]
