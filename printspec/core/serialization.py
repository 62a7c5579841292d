"""JSON-friendly serialization of outcomes and summaries."""

from typing import Any

from .validate import BatchSummary, CheckResult, RecordOutcome


def serialize_check(check: CheckResult) -> dict[str, Any]:
    return {"name": check.name, "passed": check.passed, "message": check.message}


def serialize_outcome(outcome: RecordOutcome) -> dict[str, Any]:
    return {
        "label": outcome.label,
        "isbn": outcome.isbn,
        "title": outcome.title,
        "filename": outcome.filename,
        "passed": outcome.passed,
        "checks": [serialize_check(check) for check in outcome.checks],
    }


def serialize_summary(summary: BatchSummary) -> dict[str, int]:
    return {"total": summary.total, "passed": summary.passed, "failed": summary.failed}


def _text(value: Any) -> str:
    return str(value or "").strip()


def parse_outcome_payload(payload: dict[str, Any]) -> RecordOutcome:
    """Rebuild a :class:`RecordOutcome` from :func:`serialize_outcome` output.

    The ``passed`` key is ignored; status is always derived from the checks.
    """
    if not isinstance(payload, dict):
        raise ValueError("Outcome payload must be an object.")
    raw_checks = payload.get("checks")
    if not isinstance(raw_checks, list):
        raise ValueError("Outcome payload requires a checks list.")

    checks: list[CheckResult] = []
    for item in raw_checks:
        if not isinstance(item, dict):
            raise ValueError("Each check must be an object.")
        name = _text(item.get("name"))
        if not name:
            raise ValueError("Each check requires a name.")
        passed = item.get("passed")
        if not isinstance(passed, bool):
            raise ValueError(f"Check {name!r} requires a boolean passed flag.")
        checks.append(CheckResult(name=name, passed=passed, message=str(item.get("message") or "")))

    filename = _text(payload.get("filename"))
    isbn = _text(payload.get("isbn"))
    return RecordOutcome(
        label=_text(payload.get("label")) or isbn or filename,
        checks=tuple(checks),
        isbn=isbn,
        title=_text(payload.get("title")),
        filename=filename,
    )


def parse_outcomes_payload(payload: Any) -> list[RecordOutcome]:
    if isinstance(payload, dict):
        payload = payload.get("outcomes")
    if not isinstance(payload, list):
        raise ValueError("Expected a list of outcomes.")
    return [parse_outcome_payload(item) for item in payload]


__all__ = [
    "parse_outcome_payload",
    "parse_outcomes_payload",
    "serialize_check",
    "serialize_outcome",
    "serialize_summary",
]
