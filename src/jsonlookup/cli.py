"""
Command-line entry point: run a lookup path against a JSON document.

    jsonlookup -q '$.store.book[?(@.price > 10)].title' -f store.json
    cat store.json | jsonlookup -q '$..author'
"""

import argparse
import json
import logging
import sys

from jsonlookup.core.options import LookupOptions
from jsonlookup.exceptions import JSONLookupError, PathSyntaxError
from jsonlookup.execution.compiled import compile

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_LOOKUP_ERROR = 1
EXIT_INPUT_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jsonlookup", description="Select values from a JSON document with a path"
    )
    parser.add_argument("-q", "--query", required=True, help="Lookup path, e.g. '$.store.book[0]'")
    parser.add_argument("-f", "--file", help="JSON file to query (defaults to stdin)")
    parser.add_argument("--compact", action="store_true", help="Print the result on one line")
    parser.add_argument(
        "--no-clone", action="store_true", help="Traverse the document without copying it first"
    )
    parser.add_argument(
        "--validate", action="store_true", help="Check the document against the JSON value model"
    )
    parser.add_argument(
        "--explain", action="store_true", help="Print the parsed segments instead of running the query"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def _read_document(path: str | None):
    if path is None:
        return json.load(sys.stdin)
    with open(path, encoding="utf-8") as handle:
        return json.load(handle)


def _report(error: JSONLookupError) -> None:
    print(f"error: {error}", file=sys.stderr)
    if isinstance(error, PathSyntaxError) and error.position is not None:
        print(error.format_pointer(), file=sys.stderr)


def main(argv: list[str] | None = None) -> int:
    """
    Run the command line.

    Params:
        argv: Arguments without the program name, sys.argv[1:] when omitted

    Returns:
        Process exit code: 0 on success, 1 on lookup errors, 2 on bad input
    """
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        query = compile(args.query)
    except JSONLookupError as e:
        _report(e)
        return EXIT_LOOKUP_ERROR

    if args.explain:
        for line in query.explain():
            print(line)
        return EXIT_OK

    try:
        document = _read_document(args.file)
    except (OSError, ValueError) as e:
        print(f"error: cannot read JSON input: {e}", file=sys.stderr)
        return EXIT_INPUT_ERROR

    options = LookupOptions(clone_document=not args.no_clone, validate_document=args.validate)
    try:
        result = query.lookup(document, options)
    except JSONLookupError as e:
        _report(e)
        return EXIT_LOOKUP_ERROR

    logger.debug("Query '%s' selected a %s", query.path, type(result).__name__)
    if args.compact:
        print(json.dumps(result, separators=(",", ":"), ensure_ascii=False))
    else:
        print(json.dumps(result, indent=2, ensure_ascii=False))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
