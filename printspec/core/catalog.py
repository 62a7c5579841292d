"""Static production rule tables.

Every set is stored as a tuple so iteration follows the declared order; reports
list allowed values in that order.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from .errors import CatalogIntegrityError, UnknownPaperError


@dataclass(frozen=True)
class PaperCompatibility:
    allowed_colours: tuple[str, ...]
    allowed_routes: tuple[str, ...]


@dataclass(frozen=True)
class RuleCatalog:
    valid_bindings: tuple[str, ...]
    valid_papers: tuple[str, ...]
    valid_colours: tuple[str, ...]
    valid_routes: tuple[str, ...]
    valid_trim_sizes: tuple[str, ...]
    paper_compatibility: Mapping[str, PaperCompatibility] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "paper_compatibility", MappingProxyType(dict(self.paper_compatibility)))
        missing = [paper for paper in self.valid_papers if paper not in self.paper_compatibility]
        unknown = [paper for paper in self.paper_compatibility if paper not in self.valid_papers]
        if missing:
            raise CatalogIntegrityError(f"Papers without compatibility rules: {', '.join(missing)}")
        if unknown:
            raise CatalogIntegrityError(f"Compatibility rules for unknown papers: {', '.join(unknown)}")

    def compatibility_for(self, paper: str) -> PaperCompatibility:
        compatibility = self.paper_compatibility.get(paper)
        if compatibility is None:
            raise UnknownPaperError(paper)
        return compatibility

    def to_dict(self) -> dict[str, object]:
        return {
            "valid_bindings": list(self.valid_bindings),
            "valid_papers": list(self.valid_papers),
            "valid_colours": list(self.valid_colours),
            "valid_routes": list(self.valid_routes),
            "valid_trim_sizes": list(self.valid_trim_sizes),
            "paper_compatibility": {
                paper: {
                    "allowed_colours": list(rules.allowed_colours),
                    "allowed_routes": list(rules.allowed_routes),
                }
                for paper, rules in self.paper_compatibility.items()
            },
        }


def is_valid(values: tuple[str, ...], value: str | None) -> bool:
    # Exact, case-sensitive match; callers pass already-trimmed values.
    return value is not None and value in values


# Extent rounding constants kept with the rule tables; no check consumes them yet.
EXTENT_NARROW_WIDTH_THRESHOLD = 156
EXTENT_NARROW_DIVISOR = 6
EXTENT_WIDE_DIVISOR = 4


DEFAULT_CATALOG = RuleCatalog(
    valid_bindings=("Cased", "Limp"),
    valid_papers=(
        "CUP MunkenPure 80 gsm",
        "Navigator 80 gsm",
        "Clairjet 90 gsm",
        "Magno Matt 90 gsm",
    ),
    valid_colours=("Mono", "Colour"),
    valid_routes=("Standard", "Premium"),
    valid_trim_sizes=(
        "140x216",
        "152x229",
        "156x234",
        "170x244",
        "189x246",
        "178x254",
        "203x254",
        "216x280",
    ),
    paper_compatibility={
        "CUP MunkenPure 80 gsm": PaperCompatibility(allowed_colours=("Mono",), allowed_routes=("Standard",)),
        "Navigator 80 gsm": PaperCompatibility(allowed_colours=("Mono",), allowed_routes=("Standard",)),
        "Clairjet 90 gsm": PaperCompatibility(allowed_colours=("Colour",), allowed_routes=("Standard",)),
        "Magno Matt 90 gsm": PaperCompatibility(allowed_colours=("Mono", "Colour"), allowed_routes=("Premium",)),
    },
)


__all__ = [
    "DEFAULT_CATALOG",
    "EXTENT_NARROW_DIVISOR",
    "EXTENT_NARROW_WIDTH_THRESHOLD",
    "EXTENT_WIDE_DIVISOR",
    "PaperCompatibility",
    "RuleCatalog",
    "is_valid",
]
