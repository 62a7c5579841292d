"""Plain-text and CSV renderings of batch outcomes."""

import csv
import io
from datetime import datetime, timezone
from typing import Sequence

from slugify import slugify

from .batch import summarize
from .validate import RecordOutcome

REPORT_TITLE = "CUP XML VALIDATION ERROR REPORT"
WIDE_DIVIDER = "=" * 80
SECTION_DIVIDER = "-" * 80
SUMMARY_DIVIDER = "-" * 40
PASS_GLYPH = "✓"
FAIL_GLYPH = "✗"

RESULTS_CSV_COLUMNS = ["label", "isbn", "title", "filename", "status", "check", "passed", "message"]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _format_timestamp(now: datetime | None = None) -> str:
    dt = now or _utcnow()
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    else:
        dt = dt.astimezone(timezone.utc)
    return dt.strftime("%Y-%m-%d %H:%M:%S UTC")


def format_report(outcomes: Sequence[RecordOutcome], *, now: datetime | None = None) -> str:
    """Render the downloadable text report.

    Output is stable for a given ``outcomes`` sequence apart from the
    ``Generated:`` line, which uses ``now`` when supplied.
    """
    if not outcomes:
        return ""

    summary = summarize(outcomes)
    lines: list[str] = [
        WIDE_DIVIDER,
        REPORT_TITLE,
        WIDE_DIVIDER,
        f"Generated: {_format_timestamp(now)}",
        "",
        "SUMMARY",
        SUMMARY_DIVIDER,
        f"Total Files Processed: {summary.total}",
        f"Files Passed: {summary.passed}",
        f"Files Failed: {summary.failed}",
        "",
        "VALIDATION RESULTS",
        WIDE_DIVIDER,
        "",
    ]

    for index, outcome in enumerate(outcomes, start=1):
        lines.append(f"{index}. ISBN: {outcome.isbn or 'N/A'}")
        if outcome.title:
            lines.append(f"   Title: {outcome.title}")
        if not outcome.isbn and outcome.filename:
            lines.append(f"   File: {outcome.filename}")
        lines.append(f"   Status: {outcome.status}")
        lines.append(SECTION_DIVIDER)

        tests_line = f"   Tests: {outcome.passed_count}/{len(outcome.checks)} passed"
        if outcome.failed_count:
            tests_line += f" ({outcome.failed_count} failed)"
        lines.append(tests_line)

        failed = outcome.failed_checks
        if failed:
            lines.append("   Failed Tests:")
            lines.extend(f"   {FAIL_GLYPH} {check.name}: {check.message}" for check in failed)
        lines.append("")

    lines.extend([WIDE_DIVIDER, "End of Report", WIDE_DIVIDER])
    return "\n".join(lines) + "\n"


def format_record_summary(outcome: RecordOutcome) -> str:
    """Short per-file text used by the copy-to-clipboard button."""
    lines = [f"Validation Results for ISBN: {outcome.isbn or outcome.filename}"]
    if outcome.title:
        lines.append(f"Title: {outcome.title}")
    lines.append(f"Status: {'Passed' if outcome.passed else 'Failed'}")
    lines.append(SUMMARY_DIVIDER)
    for check in outcome.checks:
        glyph = PASS_GLYPH if check.passed else FAIL_GLYPH
        lines.append(f"{glyph} {check.name}: {check.message}")
    lines.append(SUMMARY_DIVIDER)
    return "\n".join(lines) + "\n"


def outcomes_to_csv(outcomes: Sequence[RecordOutcome]) -> str:
    output = io.StringIO()
    writer = csv.DictWriter(output, fieldnames=RESULTS_CSV_COLUMNS, lineterminator="\n")
    writer.writeheader()
    for outcome in outcomes:
        for check in outcome.checks:
            writer.writerow(
                {
                    "label": outcome.label,
                    "isbn": outcome.isbn,
                    "title": outcome.title,
                    "filename": outcome.filename,
                    "status": outcome.status,
                    "check": check.name,
                    "passed": "true" if check.passed else "false",
                    "message": check.message,
                }
            )
    return output.getvalue()


def make_report_filename(
    *,
    prefix: str = "cup validation summary",
    extension: str = "txt",
    now: datetime | None = None,
) -> str:
    dt = now or _utcnow()
    stem = slugify(prefix, separator="_") or "validation_summary"
    return f"{stem}_{dt.strftime('%Y-%m-%d')}.{extension}"


__all__ = [
    "RESULTS_CSV_COLUMNS",
    "format_record_summary",
    "format_report",
    "make_report_filename",
    "outcomes_to_csv",
]
