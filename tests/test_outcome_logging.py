from printspec.core.batch import run_batch
from printspec.core.validate import RecordOutcome
from printspec.server.logging import outcome_to_loggable
from tests.helpers._record_builders import make_record


def _build_sample_outcome() -> RecordOutcome:
    return run_batch([("sample.xml", make_record(colour="Mono", title="L" * 200))])[0]


def test_outcome_to_loggable_returns_none_when_debug_disabled() -> None:
    assert outcome_to_loggable(_build_sample_outcome(), debug_enabled=False) is None


def test_outcome_to_loggable_low_verbosity() -> None:
    payload = outcome_to_loggable(_build_sample_outcome(), verbosity="low", debug_enabled=True)
    assert payload == {
        "label": "9780000000000",
        "filename": "sample.xml",
        "status": "FAILED",
        "checks": "7/8",
    }


def test_outcome_to_loggable_medium_lists_failed_checks_and_truncates_title() -> None:
    payload = outcome_to_loggable(_build_sample_outcome(), verbosity="medium", debug_enabled=True)
    assert payload is not None
    assert payload["title"].endswith("... [truncated]")
    assert [item["name"] for item in payload["failed"]] == ["Colour/Paper Compatibility"]


def test_outcome_to_loggable_high_lists_every_check() -> None:
    payload = outcome_to_loggable(_build_sample_outcome(), verbosity="high", debug_enabled=True)
    assert payload is not None
    assert len(payload["results"]) == 8


def test_outcome_to_loggable_extrahigh_returns_full_payload() -> None:
    payload = outcome_to_loggable(_build_sample_outcome(), verbosity="extrahigh", debug_enabled=True)
    assert payload is not None
    assert payload["title"] == "L" * 200
    assert payload["passed"] is False


def test_outcome_to_loggable_unknown_verbosity_falls_back_to_medium() -> None:
    payload = outcome_to_loggable(_build_sample_outcome(), verbosity="chatty", debug_enabled=True)
    assert payload is not None
    assert "failed" in payload
