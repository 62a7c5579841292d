"""Web routes for multi-file upload, results page and report download."""


from pathlib import Path

from fastapi import APIRouter, File, Form, HTTPException, Request, UploadFile
from fastapi.responses import HTMLResponse, Response
from fastapi.templating import Jinja2Templates

from ..helpers.downloads import report_attachment
from ..helpers.payload import decode_outcomes_json_b64
from ..helpers.rendering import render_web_page
from ..helpers.validating import run_validate_uploads

TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "web" / "templates"
templates = Jinja2Templates(directory=str(TEMPLATE_DIR))
router = APIRouter()


@router.get("/", response_class=HTMLResponse)
def home(request: Request) -> HTMLResponse:
    return render_web_page(request, templates)


@router.post("/validate", response_class=HTMLResponse)
def validate_from_web(
    request: Request,
    files: list[UploadFile] = File(...),
) -> HTMLResponse:
    try:
        result = run_validate_uploads(files)
    except HTTPException as exc:
        return render_web_page(
            request,
            templates,
            error=str(exc.detail),
            error_title="Nothing to validate",
            status_code=exc.status_code,
        )
    return render_web_page(request, templates, outcomes=result.outcomes)


@router.post("/report.txt")
def download_report_web(outcomes_b64: str = Form(...)) -> Response:
    return report_attachment(decode_outcomes_json_b64(outcomes_b64))
