"""Attachment responses for the report and CSV downloads."""


from fastapi.responses import Response

from ...config import get_settings
from ...core.reporting import format_report, make_report_filename, outcomes_to_csv
from ...core.validate import RecordOutcome


def attachment_response(content: str, *, extension: str, media_type: str) -> Response:
    filename = make_report_filename(prefix=get_settings().report_prefix, extension=extension)
    return Response(
        content=content.encode("utf-8"),
        media_type=f"{media_type}; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


def report_attachment(outcomes: list[RecordOutcome]) -> Response:
    return attachment_response(format_report(outcomes), extension="txt", media_type="text/plain")


def csv_attachment(outcomes: list[RecordOutcome]) -> Response:
    return attachment_response(outcomes_to_csv(outcomes), extension="csv", media_type="text/csv")


__all__ = ["attachment_response", "csv_attachment", "report_attachment"]
