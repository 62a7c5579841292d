"""JSON API routes: /health, /api/v1/*."""


from fastapi import APIRouter, File, HTTPException, UploadFile
from fastapi.responses import Response

from ...config import get_settings
from ...core.api import validate
from ...core.catalog import DEFAULT_CATALOG
from ...core.records import Record
from ...core.serialization import parse_outcomes_payload, serialize_check, serialize_outcome, serialize_summary
from ...core.validate import RecordOutcome
from ..helpers.downloads import csv_attachment, report_attachment
from ..helpers.validating import run_validate_uploads
from ..schemas import OutcomesRequest, RecordRequest

settings = get_settings()
router = APIRouter()


@router.get("/health")
def health() -> dict:
    return {"status": "ok", "app": settings.app_name}


@router.get("/api/v1/catalog")
def catalog() -> dict:
    return DEFAULT_CATALOG.to_dict()


@router.post("/api/v1/validate/record")
def validate_record_api(payload: RecordRequest) -> dict:
    record = Record.from_mapping(payload.model_dump())
    checks = validate(record)
    return {
        "passed": all(check.passed for check in checks),
        "checks": [serialize_check(check) for check in checks],
    }


@router.post("/api/v1/validate")
def validate_files_api(files: list[UploadFile] = File(...)) -> dict:
    result = run_validate_uploads(files)
    return {
        "summary": serialize_summary(result.summary),
        "outcomes": [serialize_outcome(outcome) for outcome in result.outcomes],
    }


def _outcomes_from_request(payload: OutcomesRequest) -> list[RecordOutcome]:
    try:
        return parse_outcomes_payload([item.model_dump() for item in payload.outcomes])
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc


@router.post("/api/v1/report.txt")
def report_text_api(payload: OutcomesRequest) -> Response:
    return report_attachment(_outcomes_from_request(payload))


@router.post("/api/v1/results.csv")
def results_csv_api(payload: OutcomesRequest) -> Response:
    return csv_attachment(_outcomes_from_request(payload))
