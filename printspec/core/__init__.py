"""Core engine API.

The core layer is framework-agnostic and safe to import from scripts, tests,
CLI commands, and web frontends.
"""

from typing import Any

_LAZY_EXPORTS: dict[str, tuple[str, str]] = {
    "BatchResult": ("printspec.core.api", "BatchResult"),
    "BatchSummary": ("printspec.core.validate", "BatchSummary"),
    "CheckResult": ("printspec.core.validate", "CheckResult"),
    "CoreConfig": ("printspec.core.config", "CoreConfig"),
    "DEFAULT_CATALOG": ("printspec.core.catalog", "DEFAULT_CATALOG"),
    "MalformedInputError": ("printspec.core.errors", "MalformedInputError"),
    "Record": ("printspec.core.records", "Record"),
    "RecordOutcome": ("printspec.core.validate", "RecordOutcome"),
    "RuleCatalog": ("printspec.core.catalog", "RuleCatalog"),
    "config_from_env": ("printspec.core.config", "config_from_env"),
    "format_record_summary": ("printspec.core.reporting", "format_record_summary"),
    "format_report": ("printspec.core.reporting", "format_report"),
    "outcomes_to_csv": ("printspec.core.reporting", "outcomes_to_csv"),
    "parse_record_xml": ("printspec.core.records", "parse_record_xml"),
    "run_batch": ("printspec.core.batch", "run_batch"),
    "summarize": ("printspec.core.batch", "summarize"),
    "validate": ("printspec.core.api", "validate"),
    "validate_documents": ("printspec.core.api", "validate_documents"),
    "validate_files": ("printspec.core.api", "validate_files"),
    "validate_record": ("printspec.core.validate", "validate_record"),
    "validate_xml": ("printspec.core.api", "validate_xml"),
}

__all__ = [
    "BatchResult",
    "BatchSummary",
    "CheckResult",
    "CoreConfig",
    "DEFAULT_CATALOG",
    "MalformedInputError",
    "Record",
    "RecordOutcome",
    "RuleCatalog",
    "config_from_env",
    "format_record_summary",
    "format_report",
    "outcomes_to_csv",
    "parse_record_xml",
    "run_batch",
    "summarize",
    "validate",
    "validate_documents",
    "validate_files",
    "validate_record",
    "validate_xml",
]


def __getattr__(name: str) -> Any:
    target = _LAZY_EXPORTS.get(name)
    if target is None:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

    module_name, attribute_name = target
    module = __import__(module_name, fromlist=[attribute_name])
    value = getattr(module, attribute_name)
    globals()[name] = value
    return value
