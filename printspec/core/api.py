"""Stable public API facade for the printspec core engine."""


from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .batch import outcome_for_record, run_batch, run_xml_batch, summarize
from .catalog import DEFAULT_CATALOG, RuleCatalog
from .config import CoreConfig, config_from_env
from .errors import MalformedInputError
from .records import MAX_XML_UPLOAD_BYTES, Record, is_xml_filename, parse_record_xml
from .reporting import format_record_summary, format_report
from .validate import BatchSummary, CheckResult, RecordOutcome, validate_record


@dataclass
class BatchResult:
    outcomes: list[RecordOutcome] = field(default_factory=list)

    @property
    def summary(self) -> BatchSummary:
        return summarize(self.outcomes)

    @property
    def passed(self) -> bool:
        return all(outcome.passed for outcome in self.outcomes)


def validate(
    record: Record | Mapping[str, Any],
    *,
    catalog: RuleCatalog = DEFAULT_CATALOG,
) -> list[CheckResult]:
    if not isinstance(record, Record):
        record = Record.from_mapping(record)
    return validate_record(record, catalog)


def validate_xml(
    data: bytes | str,
    *,
    filename: str = "",
    catalog: RuleCatalog = DEFAULT_CATALOG,
    config: CoreConfig | None = None,
) -> RecordOutcome:
    return validate_documents([(filename, data)], catalog=catalog, config=config).outcomes[0]


def validate_documents(
    documents: Iterable[tuple[str, bytes | str]],
    *,
    catalog: RuleCatalog = DEFAULT_CATALOG,
    config: CoreConfig | None = None,
) -> BatchResult:
    resolved = config or config_from_env()
    return BatchResult(outcomes=run_xml_batch(documents, catalog=catalog, strict=resolved.strict))


def iter_xml_paths(paths: Iterable[str | Path]) -> list[Path]:
    """Expand directories to their ``*.xml`` files; explicit file paths are kept as given."""
    resolved: list[Path] = []
    for item in paths:
        path = Path(item)
        if path.is_dir():
            resolved.extend(
                sorted(child for child in path.iterdir() if child.is_file() and is_xml_filename(child.name))
            )
        else:
            resolved.append(path)
    return resolved


def _read_xml_file(path: Path) -> Record:
    try:
        size = path.stat().st_size
        if size > MAX_XML_UPLOAD_BYTES:
            raise MalformedInputError("File Error", "XML file exceeds 5 MB limit.")
        data = path.read_bytes()
    except OSError as exc:
        raise MalformedInputError("File Error", f"Failed to process file: {exc.strerror or exc}") from exc
    return parse_record_xml(data)


def validate_files(
    paths: Iterable[str | Path],
    *,
    catalog: RuleCatalog = DEFAULT_CATALOG,
    config: CoreConfig | None = None,
) -> BatchResult:
    resolved = config or config_from_env()

    def _loader(path: Path):
        return lambda: _read_xml_file(path)

    outcomes = run_batch(
        ((path.name, _loader(path)) for path in iter_xml_paths(paths)),
        catalog=catalog,
        strict=resolved.strict,
    )
    return BatchResult(outcomes=outcomes)


__all__ = [
    "BatchResult",
    "CoreConfig",
    "config_from_env",
    "format_record_summary",
    "format_report",
    "iter_xml_paths",
    "outcome_for_record",
    "run_batch",
    "summarize",
    "validate",
    "validate_documents",
    "validate_files",
    "validate_xml",
]
