"""Walk through typical normalize_code / normalize_codes calls.

Usage:
  python scripts/basic_usage.py
"""

from __future__ import annotations

import json

from game_code_normalizer import normalize_code, normalize_codes

SAMPLE_INPUTS: list[object] = [
    " 30IKES ",
    "Merristmas",
    "25-IKES",
    "bad code!!",
    {"code": "STAT-RESET", "meta": {"source": "discord", "discoveredAt": "2025-12-28"}},
]

CUSTOM_CONFIG = {
    "minLength": 2,
    "maxLength": 20,
    "prefixes": {"XMAS": "event_reward"},
    "keywords": {"BONUS": "currency"},
}

EDGE_CASES = [
    "",
    "   ",
    "---",
    "AB",
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ",
    "VALID1234",
]


def banner(title: str) -> None:
    print(f"--- {title} ---")
    print()


def main() -> int:
    print("=" * 60)
    print("game-code-normalizer - example output")
    print("=" * 60)
    print()

    banner("Individual normalize_code() calls")
    for index, value in enumerate(SAMPLE_INPUTS, start=1):
        display = json.dumps(value) if isinstance(value, dict) else f'"{value}"'
        print(f"[{index}] Input: {display}")
        print(normalize_code(value).to_json(indent=4))
        print()

    banner("Batch normalize_codes() call")
    results = normalize_codes(SAMPLE_INPUTS)
    print(json.dumps([result.to_dict() for result in results], indent=2))
    print()

    banner("Custom configuration")
    print("Config:", json.dumps(CUSTOM_CONFIG, indent=2))
    print(normalize_code("XMAS2025BONUS", CUSTOM_CONFIG).to_json(indent=2))
    print()

    banner("Edge cases")
    for value in EDGE_CASES:
        result = normalize_code(value)
        print(f'Input: "{value}"')
        print(
            f'  normalized: "{result.normalized}", isValidFormat: {result.is_valid_format}, '
            f"hints: [{', '.join(result.hints)}]"
        )

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
