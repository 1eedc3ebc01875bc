#!/usr/bin/env python3
"""Parse one numeric date per line and print one JSON document per line."""
import argparse
import json
import sys

# Load .env file
from dotenv import load_dotenv
load_dotenv()

from occurrence_parsers.api.routes.dates import serialize_result
from occurrence_parsers.config import Settings
from occurrence_parsers.dates.numerical_parser import NumericalDateParser
from occurrence_parsers.models.temporal import DateFormatHint
from occurrence_parsers.utils.logging import setup_logging


def main(argv: list[str] | None = None) -> int:
    settings = Settings()
    ap = argparse.ArgumentParser(description=__doc__)
    ap.add_argument("file", nargs="?", help="input file (default: stdin)")
    ap.add_argument("--hint", choices=[h.value for h in DateFormatHint], default=DateFormatHint.NONE.value)
    ap.add_argument("--base-year", type=int, default=settings.date_base_year,
                    help="enable 2-digit years, resolved into [base, base+99]")
    args = ap.parse_args(argv)

    setup_logging(settings.log_level)

    if args.base_year is None:
        parser = NumericalDateParser.default()
    else:
        try:
            parser = NumericalDateParser.with_base_year(args.base_year)
        except ValueError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 2

    stream = open(args.file, encoding="utf-8") if args.file else sys.stdin
    failed = 0
    try:
        for line in stream:
            text = line.rstrip("\n")
            if not text.strip():
                continue
            result = parser.parse(text, args.hint)
            if not result.is_successful:
                failed += 1
            print(json.dumps(serialize_result(text, result), ensure_ascii=False))
    finally:
        if stream is not sys.stdin:
            stream.close()

    print(f"{failed} line(s) could not be parsed", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
