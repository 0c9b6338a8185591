import argparse
import sys
from typing import List, Optional

from rich.console import Console

from .config import SortConfig
from .errors import InvalidArgumentError
from .reporter import Reporter
from .sorter import FileSorter


class _ArgumentParser(argparse.ArgumentParser):
    # argparse exits with 2 on bad input; callers expect 1
    def error(self, message):
        raise InvalidArgumentError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="sort-files",
        allow_abbrev=False,
        description="Sort files from the usual home folders into Media, Archive, Docs and 3D.",
    )
    parser.add_argument("--dry-run", "-d", action="store_true",
                        help="Show what would be moved without actually moving files")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Show detailed output")
    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = build_parser()
    args, unknown = parser.parse_known_args(argv)
    if unknown:
        raise InvalidArgumentError(f"Unknown option: {unknown[0]}")
    if args.dry_run:
        args.verbose = True
    return args


def main(argv: Optional[List[str]] = None, console: Optional[Console] = None) -> int:
    console = console or Console(highlight=False, emoji=False, soft_wrap=True)
    try:
        args = parse_args(argv)
    except InvalidArgumentError as exc:
        console.print(str(exc), markup=False, soft_wrap=True)
        console.print("Use --help for usage information")
        return 1

    reporter = Reporter(console, verbose=args.verbose)
    reporter.banner(args.dry_run)
    sorter = FileSorter(SortConfig.default(), reporter, dry_run=args.dry_run)
    counters = sorter.run()
    reporter.summary(counters, args.dry_run)
    return 0


if __name__ == "__main__":
    sys.exit(main())
