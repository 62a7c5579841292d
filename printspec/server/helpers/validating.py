"""Upload validation helpers shared by the web and API routers."""

from __future__ import annotations

import json
import logging

from fastapi import HTTPException, UploadFile

from ...core.api import BatchResult, validate_documents
from ...core.config import config_from_env
from ...core.records import MAX_XML_UPLOAD_BYTES, is_xml_filename
from ..logging import outcome_to_loggable

logger = logging.getLogger("uvicorn.error")


def _read_upload(upload: UploadFile) -> bytes:
    # Reading one byte past the cap is enough for the extractor to report the
    # file as oversized.
    return upload.file.read(MAX_XML_UPLOAD_BYTES + 1)


def run_validate_uploads(files: list[UploadFile]) -> BatchResult:
    """Validate the ``.xml`` uploads in order, skipping other files.

    Raises ``HTTPException(422)`` when no XML file was supplied.
    """
    xml_files = [upload for upload in files if is_xml_filename(upload.filename)]
    if not xml_files:
        raise HTTPException(status_code=422, detail="Upload at least one .xml file.")

    skipped = len(files) - len(xml_files)
    if skipped:
        logger.debug("Ignored %d non-XML upload(s).", skipped)

    documents = [(str(upload.filename or ""), _read_upload(upload)) for upload in xml_files]
    try:
        result = validate_documents(documents, config=config_from_env(strict=False))
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    summary = result.summary
    logger.debug(
        "Validated %d XML file(s): %d passed, %d failed.",
        summary.total,
        summary.passed,
        summary.failed,
    )
    for outcome in result.outcomes:
        loggable = outcome_to_loggable(outcome)
        if loggable is not None:
            logger.debug("Validation outcome:\n%s", json.dumps(loggable, ensure_ascii=False, indent=2))
    return result
