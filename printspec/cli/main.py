"""Command-line frontend for the printspec core engine."""

from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

from printspec.core import DEFAULT_CATALOG, config_from_env, format_report, outcomes_to_csv, validate_files
from printspec.core.serialization import serialize_outcome, serialize_summary

load_dotenv(Path(__file__).resolve().parents[2] / ".env")

EXIT_OK = 0
EXIT_FAILED = 1


def _json_dump(data: Any) -> None:
    print(json.dumps(data, ensure_ascii=False, indent=2))


def _cmd_validate(args: argparse.Namespace) -> int:
    result = validate_files(args.paths, config=config_from_env(strict=args.strict or None))
    if not result.outcomes:
        raise ValueError("No XML files found.")

    report_text = format_report(result.outcomes)
    if args.report:
        Path(args.report).write_text(report_text, encoding="utf-8")
    if args.csv:
        Path(args.csv).write_text(outcomes_to_csv(result.outcomes), encoding="utf-8")

    if args.json:
        _json_dump(
            {
                "summary": serialize_summary(result.summary),
                "outcomes": [serialize_outcome(outcome) for outcome in result.outcomes],
            }
        )
    else:
        print(report_text, end="")
    return EXIT_OK if result.passed else EXIT_FAILED


def _cmd_catalog(args: argparse.Namespace) -> int:
    _json_dump(DEFAULT_CATALOG.to_dict())
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="printspec", description="Print-specification XML validator")
    subparsers = parser.add_subparsers(dest="command", required=True)

    validate_cmd = subparsers.add_parser("validate", help="Validate XML files or directories of XML files")
    validate_cmd.add_argument("paths", nargs="+", help="XML file paths or directories")
    validate_cmd.add_argument("--report", default="", help="Write the text report to this path")
    validate_cmd.add_argument("--csv", default="", help="Write per-check results as CSV to this path")
    validate_cmd.add_argument("--json", action="store_true", help="Print JSON instead of the text report")
    validate_cmd.add_argument("--strict", action="store_true", help="Abort on the first unreadable file")
    validate_cmd.set_defaults(func=_cmd_validate)

    catalog_cmd = subparsers.add_parser("catalog", help="Print the production rule catalog")
    catalog_cmd.set_defaults(func=_cmd_catalog)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        return int(args.func(args) or 0)
    except Exception as exc:
        parser.exit(status=2, message=f"error: {exc}\n")


if __name__ == "__main__":
    raise SystemExit(main())
