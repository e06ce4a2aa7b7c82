# cli.py

from __future__ import annotations

import argparse
import json
import sys
from typing import List, Optional

import calculator
from app.format.currency import get_formatter
from config import get_settings


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Split an estate between sons and daughters at 2:1."
    )
    parser.add_argument("amount", help="Total estate amount")
    parser.add_argument("--sons", default="0", help="Number of sons (default 0)")
    parser.add_argument("--daughters", default="0", help="Number of daughters (default 0)")
    parser.add_argument("--json", action="store_true", help="Print the raw result as JSON")
    parser.add_argument(
        "--format",
        dest="currency_format",
        default=None,
        help="Currency display format (inr, plain); defaults to CURRENCY_FORMAT",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    outcome = calculator.calculate_from_form(args.amount, args.sons, args.daughters)

    if args.json:
        print(json.dumps(outcome.to_state().model_dump(mode="json", by_alias=True, exclude_none=True)))
        return 0 if outcome.ok else 1

    if not outcome.ok:
        print(f"Error: {outcome.error.message}", file=sys.stderr)
        return 1

    try:
        formatter = get_formatter(args.currency_format or get_settings().currency_format)
    except ValueError as exc:
        print(str(exc), file=sys.stderr)
        return 2
    print(f"Each Son's Share: {formatter.format(outcome.result.son_share)}")
    print(f"Each Daughter's Share: {formatter.format(outcome.result.daughter_share)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
