from typing import Any

from ...config import get_settings
from ...core.serialization import serialize_outcome
from ...core.validate import RecordOutcome

_DEFAULT_MESSAGE_LIMITS = {
    "low": 80,
    "medium": 160,
    "high": 240,
}
_SUPPORTED_VERBOSITIES = {"low", "medium", "high", "extrahigh"}


def _truncate_message(value: str | None, *, limit: int) -> str:
    text = str(value or "").strip()
    if len(text) <= limit:
        return text
    return f"{text[:limit].rstrip()}... [truncated]"


def _normalize_verbosity(verbosity: str) -> str:
    normalized = str(verbosity or "").strip().lower()
    if normalized in _SUPPORTED_VERBOSITIES:
        return normalized
    return "medium"


def _check_lines(outcome: RecordOutcome, *, failed_only: bool, limit: int) -> list[dict[str, Any]]:
    return [
        {
            "name": check.name,
            "passed": check.passed,
            "message": _truncate_message(check.message, limit=limit),
        }
        for check in outcome.checks
        if not (failed_only and check.passed)
    ]


def outcome_to_loggable(
    outcome: RecordOutcome,
    *,
    verbosity: str | None = None,
    debug_enabled: bool | None = None,
) -> dict[str, Any] | None:
    settings = get_settings()
    if debug_enabled is None:
        debug_enabled = settings.debug

    if not debug_enabled:
        return None

    resolved_verbosity = verbosity if verbosity is not None else settings.log_verbosity
    level = _normalize_verbosity(resolved_verbosity)
    if level == "extrahigh":
        return serialize_outcome(outcome)

    summary: dict[str, Any] = {
        "label": outcome.label,
        "filename": outcome.filename,
        "status": outcome.status,
        "checks": f"{outcome.passed_count}/{len(outcome.checks)}",
    }
    if level == "low":
        return summary

    summary["title"] = _truncate_message(outcome.title, limit=_DEFAULT_MESSAGE_LIMITS["low"])
    if level == "high":
        summary["results"] = _check_lines(outcome, failed_only=False, limit=_DEFAULT_MESSAGE_LIMITS["high"])
        return summary

    summary["failed"] = _check_lines(outcome, failed_only=True, limit=_DEFAULT_MESSAGE_LIMITS["medium"])
    return summary
