"""
msws CLI: Command-line front-end for the generator.

Provides commands for:
- rand: Print generator output for a seed (or a derived seed)
- seed: Print the seeds derived from integer indices

Defaults for the output count and format come from `.msws.toml`.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from msws.config import OUTPUT_FORMATS, ConfigError, load_config
from msws.rand import InvalidSeedError, Rand
from msws.seeds import seed

logger = logging.getLogger(__name__)


def _int_literal(text: str) -> int:
    """Parse decimal, hex (0x), octal (0o) or binary (0b) integers."""
    try:
        return int(text, 0)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {text!r}") from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="msws",
        description="msws: Middle Square Weyl Sequence random numbers",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # rand
    rand_parser = subparsers.add_parser(
        "rand",
        help="Print random numbers for a seed",
    )
    source = rand_parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "seed",
        nargs="?",
        type=_int_literal,
        help="Odd 64-bit seed (e.g. 0xb5ad4eceda1ce2a9)",
    )
    source.add_argument(
        "--index", "-i",
        type=_int_literal,
        help="Use the seed derived from this index instead",
    )
    rand_parser.add_argument(
        "--count", "-n",
        type=int,
        help="Number of values to print (default: from config, else 10)",
    )
    rand_parser.add_argument(
        "--format", "-f",
        choices=OUTPUT_FORMATS,
        help="Output format (default: from config, else dec)",
    )

    # seed
    seed_parser = subparsers.add_parser(
        "seed",
        help="Print seeds derived from indices",
    )
    seed_parser.add_argument(
        "indices",
        nargs="+",
        type=_int_literal,
        help="Integer indices",
    )
    seed_parser.add_argument(
        "--format", "-f",
        choices=OUTPUT_FORMATS,
        help="Output format (default: from config, else dec)",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    # Setup logging
    level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if args.command is None:
        parser.print_help()
        return 0

    try:
        config = load_config()
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    try:
        if args.command == "rand":
            return handle_rand(args, config.count, args.format or config.format)
        elif args.command == "seed":
            return handle_seed(args, args.format or config.format)
        else:
            parser.print_help()
            return 0
    except ImportError as e:
        # Optional extra missing for the requested output format
        print(f"Error: {e}", file=sys.stderr)
        return 1


def handle_rand(args: argparse.Namespace, default_count: int, fmt: str) -> int:
    """Handle the rand command."""
    count = args.count if args.count is not None else default_count
    if count <= 0:
        print(f"Error: --count must be a positive integer, got {count}", file=sys.stderr)
        return 1

    if args.index is not None:
        s = seed(args.index)
        logger.debug(f"Using seed {s:#018x} derived from index {args.index}")
    else:
        s = args.seed

    try:
        r = Rand(s)
    except InvalidSeedError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    values = [r.rand() for _ in range(count)]
    _emit(values, fmt, width=8, title=f"seed {r.seed:#018x}")
    return 0


def handle_seed(args: argparse.Namespace, fmt: str) -> int:
    """Handle the seed command."""
    rows = [(n, seed(n)) for n in args.indices]
    _emit_pairs(rows, fmt, width=16, title="derived seeds")
    return 0


def _emit(values: list[int], fmt: str, width: int, title: str) -> None:
    _emit_pairs(list(enumerate(values)), fmt, width, title)


def _emit_pairs(
    rows: list[tuple[int, int]], fmt: str, width: int, title: str
) -> None:
    if fmt == "json":
        print(json.dumps([value for _, value in rows]))
    elif fmt == "table":
        _print_table(rows, width, title)
    else:
        for key, value in rows:
            print(f"{key}: {_format_value(value, fmt, width)}")


def _format_value(value: int, fmt: str, width: int) -> str:
    if fmt == "hex":
        return f"0x{value:0{width}x}"
    return str(value)


def _print_table(rows: list[tuple[int, int]], width: int, title: str) -> None:
    try:
        from rich.console import Console
        from rich.table import Table
    except ImportError as e:
        raise ImportError(
            "The table format requires the 'rich' package. "
            "Install it with: pip install msws[rich]"
        ) from e

    table = Table(title=title)
    table.add_column("Index", justify="right", style="cyan")
    table.add_column("Hex", style="green")
    table.add_column("Decimal", justify="right")
    for key, value in rows:
        table.add_row(str(key), f"0x{value:0{width}x}", str(value))

    Console().print(table)


if __name__ == "__main__":
    sys.exit(main())
