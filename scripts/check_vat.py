#!/usr/bin/env python3
"""
Validate VAT numbers from the command line.

Usage:
    python scripts/check_vat.py BE0403199702 NL123456782B01
    python scripts/check_vat.py --local DE136695976
    python scripts/check_vat.py --format-only DK12345678

Exit codes: 0 all valid, 1 at least one invalid, 2 VIES failure.
"""
import argparse
import logging
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(REPO_ROOT))

from vatcheck.utils.env import load_env_if_present  # noqa: E402

load_env_if_present()

from connectors.vies.exceptions import ViesError  # noqa: E402
from vatcheck.core.logging import setup_logging  # noqa: E402
from vatcheck.services.vat_validation import VatValidator  # noqa: E402

logger = logging.getLogger("check_vat")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Validate EU VAT numbers (format, checksum, VIES).")
    parser.add_argument("vat_numbers", nargs="+", metavar="VAT", help="VAT numbers including country prefix")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--local", action="store_true", help="Format + local checksum, no VIES call")
    mode.add_argument("--format-only", action="store_true", help="Format check only")
    parser.add_argument("--log-level", default=None, help="Override LOG_LEVEL (e.g. DEBUG)")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None, validator: VatValidator | None = None) -> int:
    args = parse_args(argv)
    setup_logging(args.log_level)
    validator = validator or VatValidator()

    all_valid = True
    for vat_number in args.vat_numbers:
        try:
            if args.format_only:
                valid = validator.validate_format(vat_number)
            else:
                valid = validator.validate(vat_number, local=args.local)
        except ViesError as e:
            print(f"{vat_number}\tERROR\t{e}", file=sys.stderr)
            return 2
        print(f"{vat_number}\t{'VALID' if valid else 'INVALID'}")
        all_valid = all_valid and valid

    return 0 if all_valid else 1


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)
        sys.exit(130)
