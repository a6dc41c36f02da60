#!/usr/bin/env python3
"""
Filter a JSON file of listings and print "price area" pairs.

  listings-filter -i houses.json -d
  listings-filter -i houses.json -f -p 300000 -o cheap_furnished.txt
"""
import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

import orjson

from listings import settings
from listings.errors import BadArguments, InputNotFound, InvalidJSON, ListingsError, UsageError
from listings.models import FilterOptions
from listings.pipeline import process
from listings.utils import locate

logger = logging.getLogger(__name__)


class _Parser(argparse.ArgumentParser):
    def error(self, message):
        raise BadArguments(f"{self.prog}: error: {message}")


def build_parser() -> argparse.ArgumentParser:
    p = _Parser(prog="listings-filter", description="Extract price/area pairs from a JSON listings file.")
    p.add_argument("-i", "--input", help="path to input JSON file")
    p.add_argument("-o", "--output", help="path to output file")
    p.add_argument("-d", "--display", action="store_true", help="display result in console")
    p.add_argument("-f", "--furnished", action="store_true", help="show only furnished houses")
    p.add_argument("-p", "--price", help="show only houses with price less than given")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging to stderr")
    return p


def configure_logging(verbose: bool) -> None:
    if verbose:
        level = logging.DEBUG
    else:
        level = logging.getLevelName(settings.LOG_LEVEL.upper())
        if not isinstance(level, int):
            # unknown names come back as "Level FOO"
            level = logging.WARNING
    logging.basicConfig(level=level, format=settings.LOG_FORMAT, stream=sys.stderr)
    logging.getLogger("listings").setLevel(level)


def load_document(path: Path):
    try:
        raw = path.read_bytes()
    except FileNotFoundError as e:
        raise InputNotFound() from e
    try:
        # undecodable bytes become U+FFFD instead of failing the parse
        doc = orjson.loads(raw.decode(settings.INPUT_ENCODING, errors="replace"))
    except orjson.JSONDecodeError as e:
        raise InvalidJSON() from e
    logger.debug("[load] %s (%d bytes)", path, len(raw))
    return doc


def emit(lines: List[str], options: FilterOptions) -> None:
    if options.display:
        for line in lines:
            print(line)
    if options.output:
        out_path = Path(options.output).resolve()
        with open(out_path, "w", encoding=settings.OUTPUT_ENCODING, newline="") as out:
            out.write(settings.LINE_SEPARATOR.join(lines))
        logger.debug("[emit] wrote %d lines to %s", len(lines), out_path)


def main(argv: Optional[List[str]] = None) -> int:
    try:
        args = build_parser().parse_args(argv)
        configure_logging(args.verbose)
        options = FilterOptions(**vars(args))

        if not options.input:
            raise UsageError()
        in_path = Path(options.input).resolve()
        if not in_path.exists():
            raise InputNotFound()

        doc = load_document(in_path)
        records = locate(doc)
        logger.debug("[locate] %d candidate records", len(records))
        lines = process(records, options)

        if not options.wants_output:
            logger.debug("[emit] no --output/--display given; nothing written")
            return 0
        emit(lines, options)
    except ListingsError as e:
        print(e.user_message(), file=sys.stderr)
        return 1
    except Exception as e:
        logger.debug("unexpected failure", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


def run():
    sys.exit(main())


if __name__ == "__main__":
    run()
