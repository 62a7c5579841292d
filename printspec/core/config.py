"""Core engine configuration.

Core config is side-effect free: it does not load dotenv files.
"""

from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class CoreConfig:
    strict: bool = False
    debug: bool = False


def _env_bool(name: str, default: bool = False) -> bool:
    val = os.getenv(name)
    if val is None:
        return default
    return val.strip().lower() in {"1", "true", "yes", "on"}


def config_from_env(*, strict: bool | None = None, debug: bool | None = None) -> CoreConfig:
    return CoreConfig(
        strict=_env_bool("PRINTSPEC_STRICT") if strict is None else strict,
        debug=_env_bool("DEBUG") if debug is None else debug,
    )


__all__ = ["CoreConfig", "config_from_env"]
