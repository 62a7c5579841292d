"""Outcome payload encoding and decoding for round-trips through web forms."""


import base64
import json

from fastapi import HTTPException

from ...core.serialization import parse_outcomes_payload, serialize_outcome
from ...core.validate import RecordOutcome


def outcomes_to_json_b64(outcomes: list[RecordOutcome]) -> str:
    payloads = [serialize_outcome(outcome) for outcome in outcomes]
    return base64.b64encode(json.dumps(payloads, ensure_ascii=False).encode("utf-8")).decode("utf-8")


def decode_outcomes_json_b64(encoded: str) -> list[RecordOutcome]:
    try:
        payload = base64.b64decode(str(encoded or "").encode("utf-8"), validate=True)
        data = json.loads(payload.decode("utf-8"))
        outcomes = parse_outcomes_payload(data)
    except Exception as exc:
        raise HTTPException(status_code=422, detail="Invalid validation results payload.") from exc
    if not outcomes:
        raise HTTPException(status_code=422, detail="No validation results to report.")
    return outcomes
