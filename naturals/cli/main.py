import argparse
import sys

from naturals._version import __version__
from naturals.catalog.ordering import parse_sort_key
from naturals.cli import show
from naturals.cli.exitcodes import EXIT_ERROR
from naturals.core.config import RunConfig


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="naturals", description="Naturals: a tiny personal-care product catalog")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    p.add_argument(
        "--sort",
        dest="sort_key",
        default="ingredients",
        help="Ordering applied before the second listing: name or ingredients (default: ingredients).",
    )
    p.add_argument("--format", choices=["text", "json"], default="text", help="Output format.")

    verbosity = p.add_mutually_exclusive_group()
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Minimal output (product count only).")
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Verbose output (numbered, with counts).")

    return p


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = RunConfig(
            sort_key=parse_sort_key(args.sort_key),
            output_format=args.format,
            verbosity="quiet" if args.quiet else ("verbose" if args.verbose else "normal"),
        )
        return show.run(config)

    except Exception as e:
        print(f"naturals: error: {e}", file=sys.stderr)
        return EXIT_ERROR
