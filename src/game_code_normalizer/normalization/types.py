"""Literal types and hint tags for normalization output."""

from typing import Literal

ProbableType = Literal["class_reroll", "stat_reset", "currency", "event_reward", "unknown"]
CodeStatus = Literal["active", "expired", "unknown"]
PatternKind = Literal["prefix", "keyword"]

UNKNOWN_TYPE: ProbableType = "unknown"
UNKNOWN_STATUS: CodeStatus = "unknown"

INVALID_CHAR_HINT = "INVALID:CHAR"
MERR_KEYWORD_HINT = "KEYWORD:MERR"
MERRY_EVENT_HINT = "EVENT:MERRY"

HINT_PREFIXES: dict[PatternKind, str] = {
    "prefix": "PREFIX",
    "keyword": "KEYWORD",
}
