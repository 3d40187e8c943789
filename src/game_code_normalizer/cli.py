"""Command-line interface for game-code-normalizer."""

import argparse
import json
import logging
import sys

from game_code_normalizer import __version__, normalize_codes
from game_code_normalizer.exceptions import GameCodeNormalizerError
from game_code_normalizer.schema import NormalizeResult


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="game-code-normalizer",
        description="Normalize and classify game redemption codes",
    )
    parser.add_argument(
        "codes",
        nargs="*",
        help="Codes to normalize (default: one per line from stdin)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output as JSON",
    )
    parser.add_argument("--min-length", type=int, help="Minimum valid length (default: 4)")
    parser.add_argument("--max-length", type=int, help="Maximum valid length (default: 16)")
    parser.add_argument(
        "--prefix",
        action="append",
        default=[],
        type=_pattern_arg,
        metavar="PATTERN=LABEL",
        help="Extra prefix pattern (repeatable)",
    )
    parser.add_argument(
        "--keyword",
        action="append",
        default=[],
        type=_pattern_arg,
        metavar="PATTERN=LABEL",
        help="Extra keyword pattern (repeatable)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"game-code-normalizer {__version__}",
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    codes = args.codes or [line.rstrip("\r\n") for line in sys.stdin if line.strip()]
    options = {
        "minLength": args.min_length,
        "maxLength": args.max_length,
        "prefixes": dict(args.prefix),
        "keywords": dict(args.keyword),
    }

    try:
        results = normalize_codes(codes, options)
    except GameCodeNormalizerError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps([result.to_dict() for result in results], indent=2, ensure_ascii=False))
    else:
        for result in results:
            _print_formatted(result)

    return 0


def _pattern_arg(value: str) -> tuple[str, str]:
    """Parse a PATTERN=LABEL pair; the pattern is matched against uppercase codes."""
    pattern, sep, label = value.partition("=")
    if not sep or not pattern.strip() or not label.strip():
        raise argparse.ArgumentTypeError(f"expected PATTERN=LABEL, got {value!r}")
    return pattern.strip().upper(), label.strip()


def _print_formatted(result: NormalizeResult) -> None:
    """Print result in human-readable format."""
    print()
    print(f"  {result.raw!r}")
    print()

    fields = [
        ("Normalized", result.normalized),
        ("Valid", "yes" if result.is_valid_format else "no"),
        ("Type", result.probable_type),
        ("Hints", _format_list(result.hints)),
        ("Length", str(result.length)),
        ("Status", result.status),
    ]

    for label, value in fields:
        display = value if value else "-"
        print(f"  {label + ':':<12} {display}")


def _format_list(items: tuple[str, ...]) -> str | None:
    """Format hints as comma-separated string."""
    if not items:
        return None
    return ", ".join(items)


if __name__ == "__main__":
    sys.exit(main())
