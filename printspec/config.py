"""Environment-backed settings for the web and command-line frontends.

The validation engine reads nothing from here; see ``printspec.core.config``.
"""

import os
from dataclasses import dataclass
from functools import lru_cache

LOG_VERBOSITY_LEVELS = ("low", "medium", "high", "extrahigh")


@dataclass(frozen=True)
class BrandPalette:
    primary: str = "#8c1d40"
    secondary: str = "#d9a441"
    ink: str = "#1d1a1c"


@dataclass(frozen=True)
class Settings:
    app_name: str
    app_tagline: str
    palette: BrandPalette
    report_prefix: str
    host: str
    port: int
    debug: bool
    log_verbosity: str
    cors_allow_origins: tuple[str, ...]


def _env_str(name: str, default: str) -> str:
    return (os.getenv(name) or "").strip() or default


def _env_bool(name: str, default: bool = False) -> bool:
    val = os.getenv(name)
    if val is None:
        return default
    return val.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, ""))
    except ValueError:
        return default


def _env_list(name: str, default: tuple[str, ...]) -> tuple[str, ...]:
    items = tuple(item.strip() for item in os.getenv(name, "").split(",") if item.strip())
    return items or default


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    verbosity = _env_str("LOG_VERBOSITY", "medium").lower()
    return Settings(
        app_name=_env_str("APP_NAME", "CUP XML Validator"),
        app_tagline=_env_str("APP_TAGLINE", "Check print-specification XML files against production rules."),
        palette=BrandPalette(
            primary=_env_str("BRAND_PRIMARY", BrandPalette.primary),
            secondary=_env_str("BRAND_SECONDARY", BrandPalette.secondary),
            ink=_env_str("BRAND_INK", BrandPalette.ink),
        ),
        report_prefix=_env_str("REPORT_PREFIX", "cup validation summary"),
        host=_env_str("HOST", "127.0.0.1"),
        port=_env_int("PORT", 8000),
        debug=_env_bool("DEBUG"),
        log_verbosity=verbosity if verbosity in LOG_VERBOSITY_LEVELS else "medium",
        cors_allow_origins=_env_list("CORS_ALLOW_ORIGINS", ("*",)),
    )


__all__ = ["BrandPalette", "LOG_VERBOSITY_LEVELS", "Settings", "get_settings"]
