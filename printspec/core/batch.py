"""Batch validation with partial-success semantics."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence
from typing import Union

from .catalog import DEFAULT_CATALOG, RuleCatalog
from .errors import ConfigurationInvariantViolation, MalformedInputError
from .records import Record, parse_record_xml
from .validate import BatchSummary, CheckResult, RecordOutcome, validate_record

logger = logging.getLogger(__name__)

RecordSource = Union[Record, Callable[[], Record]]


def outcome_for_record(
    record: Record,
    *,
    filename: str = "",
    catalog: RuleCatalog = DEFAULT_CATALOG,
) -> RecordOutcome:
    checks = validate_record(record, catalog)
    return RecordOutcome(
        label=record.isbn or filename,
        checks=tuple(checks),
        isbn=record.isbn,
        title=record.title,
        filename=filename,
    )


def outcome_for_error(filename: str, check_name: str, message: str) -> RecordOutcome:
    return RecordOutcome(
        label=filename,
        checks=(CheckResult(check_name, False, message),),
        filename=filename,
    )


def run_batch(
    items: Iterable[tuple[str, RecordSource]],
    *,
    catalog: RuleCatalog = DEFAULT_CATALOG,
    strict: bool = False,
) -> list[RecordOutcome]:
    """Validate each ``(filename, source)`` pair in order.

    ``source`` is either a :class:`Record` or a zero-argument loader returning
    one. A loader failure becomes a single failing outcome for that file and
    the batch moves on, unless ``strict`` is set.
    """
    outcomes: list[RecordOutcome] = []
    for filename, source in items:
        try:
            record = source() if callable(source) else source
        except MalformedInputError as exc:
            if strict:
                raise
            logger.debug("Skipping malformed input %s: %s", filename, exc.message)
            outcomes.append(outcome_for_error(filename, exc.check_name, exc.message))
            continue
        except ConfigurationInvariantViolation:
            raise
        except Exception as exc:
            if strict:
                raise
            logger.exception("Unexpected error loading %s", filename)
            outcomes.append(outcome_for_error(filename, "Processing Error", f"Error: {exc}"))
            continue

        outcomes.append(outcome_for_record(record, filename=filename, catalog=catalog))
    return outcomes


def run_xml_batch(
    documents: Iterable[tuple[str, bytes | str]],
    *,
    catalog: RuleCatalog = DEFAULT_CATALOG,
    strict: bool = False,
) -> list[RecordOutcome]:
    def _loader(data: bytes | str) -> Callable[[], Record]:
        return lambda: parse_record_xml(data)

    return run_batch(
        ((filename, _loader(data)) for filename, data in documents),
        catalog=catalog,
        strict=strict,
    )


def summarize(outcomes: Sequence[RecordOutcome]) -> BatchSummary:
    total = len(outcomes)
    passed = sum(1 for outcome in outcomes if outcome.passed)
    return BatchSummary(total=total, passed=passed, failed=total - passed)


__all__ = [
    "outcome_for_error",
    "outcome_for_record",
    "run_batch",
    "run_xml_batch",
    "summarize",
]
