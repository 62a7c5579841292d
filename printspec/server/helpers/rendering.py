"""Web page rendering helper."""

from __future__ import annotations

from fastapi import Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from ...config import get_settings
from ...core.batch import summarize
from ...core.reporting import format_record_summary
from ...core.validate import RecordOutcome
from .payload import outcomes_to_json_b64

settings = get_settings()


def _outcome_cards(outcomes: list[RecordOutcome]) -> list[dict]:
    return [
        {
            "display_name": outcome.isbn or outcome.filename,
            "title": outcome.title,
            "passed": outcome.passed,
            "checks": list(outcome.checks),
            "clipboard_text": format_record_summary(outcome),
        }
        for outcome in outcomes
    ]


def render_web_page(
    request: Request,
    templates: Jinja2Templates,
    *,
    template_name: str = "index.html",
    outcomes: list[RecordOutcome] | None = None,
    error: str | None = None,
    error_title: str = "Error",
    status_code: int = 200,
) -> HTMLResponse:
    results = list(outcomes or [])
    summary = summarize(results)
    return templates.TemplateResponse(
        request,
        template_name,
        {
            "brand": settings,
            "error": error,
            "error_title": error_title,
            "summary": {
                "total": summary.total,
                "showing": summary.total,
                "passed": summary.passed,
                "failed": summary.failed,
            },
            "cards": _outcome_cards(results),
            "outcomes_json_b64": outcomes_to_json_b64(results) if results else None,
        },
        status_code=status_code,
    )
