"""Command line: python -m daiji 12345 "120.3045E4" → строки даидзи."""

import argparse
import logging
import sys

from daiji.converter import DaijiConverter
from daiji.core.domain import OverflowPolicy
from daiji.core.errors import DaijiError

EXIT_ERROR = 2


def main(argv: list[str] | None = None) -> int:
    argv = sys.argv[1:] if argv is None else argv

    ap = argparse.ArgumentParser(
        prog="daiji",
        description="Convert numerals (e.g. 12345, 1.2E4) to Japanese daiji kanji.",
    )

    ap.add_argument(
        "values",
        nargs="*",
        help="Numeral strings. If omitted, reads stdin (one value per line).",
    )

    ap.add_argument(
        "--config",
        metavar="PATH",
        help="JSON config file with unit/glyph tables and flags.",
    )

    ap.add_argument(
        "--no-append-one",
        action="store_true",
        help="Do not write 壱 before 千/百/拾 (1000 → 千).",
    )

    ap.add_argument(
        "--overflow",
        choices=[p.value for p in OverflowPolicy],
        help="Behaviour when large unit names run out (default: from config).",
    )

    ap.add_argument(
        "--decompose",
        action="store_true",
        help="Print the normalized numeral instead of daiji.",
    )

    ap.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging on stderr.",
    )

    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    values = args.values or [line.strip() for line in sys.stdin if line.strip()]

    try:
        if args.config:
            converter = DaijiConverter.from_config_file(args.config)
        else:
            converter = DaijiConverter()
        if args.no_append_one:
            converter.append_one_before_small_units = False
        if args.overflow:
            converter.overflow_policy = OverflowPolicy(args.overflow)

        for value in values:
            if args.decompose:
                print(converter.normalize(value))
            else:
                print(converter.convert_numeral_string(value))
    except (DaijiError, OSError) as e:
        print(f"daiji: {e}", file=sys.stderr)
        return EXIT_ERROR

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
