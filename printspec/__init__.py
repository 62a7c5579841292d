"""Public package entrypoint for the printspec engine.

This package validates print-specification XML records against production
rules, plus optional frontend adapters (CLI and FastAPI server).
"""

from importlib.metadata import PackageNotFoundError, version
from typing import Any

_LAZY_EXPORTS: dict[str, tuple[str, str]] = {
    "Record": ("printspec.core", "Record"),
    "app": ("printspec.server.main", "app"),
    "create_app": ("printspec.server.main", "create_app"),
    "format_report": ("printspec.core", "format_report"),
    "summarize": ("printspec.core", "summarize"),
    "validate": ("printspec.core", "validate"),
    "validate_files": ("printspec.core", "validate_files"),
    "validate_xml": ("printspec.core", "validate_xml"),
}

try:
    __version__ = version("printspec")
except PackageNotFoundError:
    __version__ = "0.0.0"

__all__ = [
    "Record",
    "__version__",
    "app",
    "create_app",
    "format_report",
    "summarize",
    "validate",
    "validate_files",
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
