"""
camelcaser CLI — Command-line interface for transformations.
"""

import argparse
import sys
from typing import Optional

from camelcaser import __version__
from camelcaser.api import DEFAULT_PIPELINE_ID, result_tokens, run
from camelcaser.ir.serialization import to_json


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="camelcaser",
        description="Convert text into one camelCase token per sentence",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"camelcaser {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    transform_parser = subparsers.add_parser("transform", help="camelCase the input")
    transform_parser.add_argument(
        "input",
        type=str,
        help="Input text (use - for stdin)",
    )
    transform_parser.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="Output format: text (one token per line, default) or json (full IR)",
    )
    transform_parser.add_argument(
        "--pipeline",
        type=str,
        default=DEFAULT_PIPELINE_ID,
        help="Pipeline to use (default: default)",
    )
    transform_parser.add_argument(
        "--log-level",
        type=str,
        choices=["silent", "info", "verbose", "debug"],
        default=None,
        help="Log verbosity level (default: info, or CAMELCASER_LOG_LEVEL env var)",
    )
    transform_parser.add_argument(
        "--log-channel",
        type=str,
        default=None,
        help="Comma-separated log channels to show (pipeline,segment,case,system). Default: all",
    )
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    if args.command == "transform":
        return run_transform(args)

    return 0


def run_transform(args: argparse.Namespace) -> int:
    """Run transformation command."""
    from camelcaser.core.logging import configure_logging

    channels = None
    if args.log_channel:
        channels = [ch.strip() for ch in args.log_channel.split(",")]

    configure_logging(
        level=args.log_level,
        channels=channels,
        force=True,
    )

    if args.input == "-":
        data = sys.stdin.buffer.read()
    else:
        data = args.input

    result = run(data, args.pipeline)

    if args.format == "json":
        print(to_json(result))
    else:
        for token in result_tokens(result):
            if isinstance(token, bytes):
                sys.stdout.buffer.write(token + b"\n")
            else:
                sys.stdout.write(token + "\n")
        sys.stdout.flush()
        for diag in result.diagnostics:
            if diag.level.value != "info":
                print(f"[{diag.level.value}] {diag.code}: {diag.message}", file=sys.stderr)

    return 0 if result.status.value in ("success", "partial") else 1


if __name__ == "__main__":
    sys.exit(main())
