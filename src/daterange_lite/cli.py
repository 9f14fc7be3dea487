"""daterange-lite CLI entry point.

Usage: uv run daterange-lite [-v] {show,resolve,json} [--from SPEC] [--to SPEC]

SPEC is "now", a shorthand offset such as 15m / 3h / 2d, or an
ISO-8601 timestamp. Omitted ends take the default range (last hour).
"""
import argparse
import logging
import sys

from daterange_lite.codec.json_codec import range_to_json
from daterange_lite.codec.shorthand import parse_date_specifier
from daterange_lite.domain.range import DateTimeRange
from daterange_lite.domain.specifier import InvalidDateSpecifier


def _add_range_arguments(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--from", dest="from_", metavar="SPEC", default=None,
        help="Start of the range (default: 1h)",
    )
    p.add_argument(
        "--to", dest="to", metavar="SPEC", default=None,
        help="End of the range (default: now)",
    )


def _add_parsers(subparsers: argparse._SubParsersAction) -> None:
    show = subparsers.add_parser("show", help="Print the range as shown in the UI.")
    _add_range_arguments(show)
    resolve = subparsers.add_parser(
        "resolve",
        help="Print the concrete start and end instants (ISO-8601).",
    )
    _add_range_arguments(resolve)
    encode = subparsers.add_parser("json", help="Print the JSON encoding of the range.")
    _add_range_arguments(encode)


def _build_range(args: argparse.Namespace) -> DateTimeRange:
    from_ = parse_date_specifier(args.from_) if args.from_ is not None else None
    to = parse_date_specifier(args.to) if args.to is not None else None
    return DateTimeRange(from_, to)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="daterange-lite",
        description="Relative and absolute time ranges -- pure Python.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Enable debug logging.",
    )
    subparsers = parser.add_subparsers(dest="command")

    _add_parsers(subparsers)

    args = parser.parse_args(argv)
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        date_range = _build_range(args)
    except InvalidDateSpecifier as exc:
        parser.error(str(exc))

    if args.command == "show":
        print(date_range.get_range_string_for_ui())
    elif args.command == "resolve":
        start, end = date_range.resolve()
        print(start.isoformat())
        print(end.isoformat())
    elif args.command == "json":
        print(range_to_json(date_range))
