"""Anonymize an AWS Config Configuration Item JSON file.

Reads a single Configuration Item or an array of them, redacts identifying
fields and writes the result to a file or to stdout.
"""

import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv

from .engine import anonymize

logger = logging.getLogger(__name__)

LOG_LEVEL_ENV = "CONFIG_ANONYMIZER_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]

_TRUE_VALUES = {"1", "t", "true", "y", "yes", "on"}
_FALSE_VALUES = {"0", "f", "false", "n", "no", "off"}


def _str_to_bool(value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise argparse.ArgumentTypeError(f"invalid boolean value: {value!r}")


def _default_log_level() -> str:
    level = os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).strip().upper()
    if level not in LOG_LEVELS:
        return DEFAULT_LOG_LEVEL
    return level


def _reject_constant(token: str) -> Any:
    # NaN, Infinity and -Infinity are accepted by the json module but are not JSON.
    raise ValueError(f"invalid JSON constant: {token}")


def _setup_logging(level: str) -> None:
    if logging.getLogger().hasHandlers():
        return
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="config-anonymizer", description=__doc__)
    parser.add_argument(
        "--input",
        required=True,
        help="Path to input AWS Configuration Item JSON file",
    )
    parser.add_argument(
        "--output",
        default="",
        help="Optional path to save anonymized JSON (default: stdout)",
    )
    parser.add_argument(
        "--dry-run",
        type=_str_to_bool,
        nargs="?",
        const=True,
        default=False,
        help="Print anonymized JSON to stdout without saving",
    )
    parser.add_argument(
        "--pretty",
        type=_str_to_bool,
        nargs="?",
        const=True,
        default=True,
        help="Pretty-print JSON output (use --pretty=false for compact output)",
    )
    parser.add_argument(
        "--log-level",
        default=_default_log_level(),
        choices=LOG_LEVELS,
        type=str.upper,
        help=f"Diagnostic log level on stderr (env: {LOG_LEVEL_ENV})",
    )
    return parser


def encode(document: Any, pretty: bool = True) -> str:
    """Serialize an anonymized document, indented by 2 spaces or compact."""
    if pretty:
        return json.dumps(document, indent=2, sort_keys=True, ensure_ascii=False, allow_nan=False)
    return json.dumps(document, separators=(",", ":"), sort_keys=True, ensure_ascii=False, allow_nan=False)


def main(argv: Optional[list[str]] = None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)
    _setup_logging(args.log_level)

    src = Path(args.input)
    try:
        raw = src.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        print(f"Failed to read input file: {e}", file=sys.stderr)
        return 1

    try:
        payload = json.loads(raw, parse_constant=_reject_constant)
    except (ValueError, RecursionError) as e:
        print(f"Failed to parse JSON: {e}", file=sys.stderr)
        return 1

    logger.info(f"Anonymizing {src}")
    anonymized = anonymize(payload)

    try:
        out = encode(anonymized, pretty=args.pretty)
    except (TypeError, ValueError, RecursionError) as e:
        print(f"Failed to encode anonymized JSON: {e}", file=sys.stderr)
        return 1

    if args.dry_run or not args.output:
        print(out)
        return 0

    dst = Path(args.output)
    try:
        dst.write_text(out, encoding="utf-8")
    except OSError as e:
        print(f"Failed to write output file: {e}", file=sys.stderr)
        return 1

    print(f"Anonymized JSON written to: {dst}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
