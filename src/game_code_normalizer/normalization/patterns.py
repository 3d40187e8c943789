"""Built-in classification patterns and length bounds."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from game_code_normalizer.normalization.types import HINT_PREFIXES, PatternKind

DEFAULT_MIN_LENGTH = 4
DEFAULT_MAX_LENGTH = 16

# Prefix patterns outrank keywords. Matching is substring containment.
DEFAULT_PREFIXES: Mapping[str, str] = MappingProxyType(
    {
        "IKES": "class_reroll",
    }
)

# Checked in this order; MERR covers Merry, Merristmas, MerryChristmas.
DEFAULT_KEYWORDS: Mapping[str, str] = MappingProxyType(
    {
        "MERR": "event_reward",
        "STAT": "stat_reset",
        "COIN": "currency",
        "GEM": "currency",
        "CASH": "currency",
    }
)


@dataclass(frozen=True)
class Pattern:
    kind: PatternKind
    text: str
    label: str

    @property
    def hint(self) -> str:
        return f"{HINT_PREFIXES[self.kind]}:{self.text}"

    def matches(self, normalized: str) -> bool:
        return self.text in normalized


def build_patterns(kind: PatternKind, mapping: Mapping[str, str]) -> tuple[Pattern, ...]:
    """Turn an ordered pattern mapping into Pattern records, keeping order."""

    return tuple(Pattern(kind=kind, text=text, label=label) for text, label in mapping.items())


def merge_patterns(defaults: Mapping[str, str], overrides: Mapping[str, str] | None) -> dict[str, str]:
    merged = dict(defaults)
    if overrides:
        merged.update(overrides)
    return merged
