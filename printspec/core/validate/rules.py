"""Print-specification validation rules.

Each rule is a plain function ``(record, catalog) -> CheckResult | None``. The
two compatibility rules return ``None`` when they do not apply (paper or the
paired field is itself invalid); that is distinct from a failing result.
"""

from __future__ import annotations

from collections.abc import Callable
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
import re

from ..catalog import DEFAULT_CATALOG, RuleCatalog, is_valid
from ..records import Record
from .report import CheckResult

Rule = Callable[[Record, RuleCatalog], "CheckResult | None"]

# Integral values with more digits are shown in exponent form.
_MAX_PLAIN_DIGITS = 40
_DECIMAL_RE = re.compile(r"^[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?$")

REQUIRED_FIELDS: tuple[tuple[str, str], ...] = (
    ("ISBN", "isbn"),
    ("Trim Height", "trim_height"),
    ("Trim Width", "trim_width"),
    ("Extent", "extent"),
    ("Paper", "paper"),
    ("Colour", "colour"),
    ("Quality", "quality"),
    ("Binding Style", "binding_style"),
)


def _join_choices(values: tuple[str, ...]) -> str:
    if len(values) <= 1:
        return "".join(values)
    if len(values) == 2:
        return f"{values[0]} or {values[1]}"
    return f"{', '.join(values[:-1])}, or {values[-1]}"


def parse_dimension(value: str | None) -> Decimal | None:
    """Parse a millimetre dimension; ``None`` unless it is a positive finite number."""
    text = str(value or "").strip()
    if not _DECIMAL_RE.match(text):
        return None
    try:
        parsed = Decimal(text)
    except InvalidOperation:
        return None
    if not parsed.is_finite() or parsed <= 0:
        return None
    return parsed


def round_millimetres(value: Decimal) -> Decimal:
    # ROUND_HALF_UP on Decimal rounds ties away from zero: 155.5 -> 156.
    return value.to_integral_value(rounding=ROUND_HALF_UP)


def format_millimetres(value: Decimal) -> str:
    rounded = round_millimetres(value)
    if rounded.adjusted() >= _MAX_PLAIN_DIGITS:
        return str(rounded)
    return format(rounded, "f")


def check_required_fields(record: Record, catalog: RuleCatalog) -> CheckResult:
    missing = [
        label
        for label, attribute in REQUIRED_FIELDS
        if not str(getattr(record, attribute) or "").strip()
    ]
    if not missing:
        return CheckResult("Required Fields", True, "All required fields are present and have values")
    return CheckResult("Required Fields", False, f"Missing or empty fields: {', '.join(missing)}")


def check_binding(record: Record, catalog: RuleCatalog) -> CheckResult:
    value = record.binding_style
    if is_valid(catalog.valid_bindings, value):
        return CheckResult("Binding Style", True, f"Valid binding: {value}")
    return CheckResult(
        "Binding Style",
        False,
        f"Invalid binding: '{value}' (must be {_join_choices(catalog.valid_bindings)})",
    )


def check_paper(record: Record, catalog: RuleCatalog) -> CheckResult:
    value = record.paper
    if is_valid(catalog.valid_papers, value):
        return CheckResult("Paper Type", True, f"Valid paper: {value}")
    return CheckResult(
        "Paper Type",
        False,
        f"Invalid paper: '{value}' (must be {_join_choices(catalog.valid_papers)})",
    )


def check_colour(record: Record, catalog: RuleCatalog) -> CheckResult:
    value = record.colour
    if is_valid(catalog.valid_colours, value):
        return CheckResult("Colour", True, f"Valid colour: {value}")
    return CheckResult(
        "Colour",
        False,
        f"Invalid colour: '{value}' (must be {_join_choices(catalog.valid_colours)})",
    )


def check_route(record: Record, catalog: RuleCatalog) -> CheckResult:
    value = record.quality
    if is_valid(catalog.valid_routes, value):
        return CheckResult("Quality/Route", True, f"Valid route: {value}")
    return CheckResult(
        "Quality/Route",
        False,
        f"Invalid route: '{value}' (must be {_join_choices(catalog.valid_routes)})",
    )


def check_trim_size(record: Record, catalog: RuleCatalog) -> CheckResult:
    width = parse_dimension(record.trim_width)
    height = parse_dimension(record.trim_height)
    if width is None or height is None:
        return CheckResult(
            "Trim Size",
            False,
            f"Invalid dimensions: {record.trim_width}x{record.trim_height}mm (must be positive numbers)",
        )

    trim_size = f"{format_millimetres(width)}x{format_millimetres(height)}"
    if is_valid(catalog.valid_trim_sizes, trim_size):
        return CheckResult("Trim Size", True, f"Valid trim size: {trim_size}mm")
    return CheckResult(
        "Trim Size",
        False,
        f"Invalid trim size: {trim_size}mm (must be one of: {', '.join(catalog.valid_trim_sizes)})",
    )


def check_colour_paper_compatibility(record: Record, catalog: RuleCatalog) -> CheckResult | None:
    paper, colour = record.paper, record.colour
    if not is_valid(catalog.valid_papers, paper) or not is_valid(catalog.valid_colours, colour):
        return None

    allowed = catalog.compatibility_for(paper).allowed_colours
    if colour in allowed:
        return CheckResult("Colour/Paper Compatibility", True, f"Colour '{colour}' is compatible with {paper}")
    return CheckResult(
        "Colour/Paper Compatibility",
        False,
        f"Colour '{colour}' is not compatible with {paper} (allowed: {', '.join(allowed)})",
    )


def check_route_paper_compatibility(record: Record, catalog: RuleCatalog) -> CheckResult | None:
    paper, route = record.paper, record.quality
    if not is_valid(catalog.valid_papers, paper) or not is_valid(catalog.valid_routes, route):
        return None

    allowed = catalog.compatibility_for(paper).allowed_routes
    if route in allowed:
        return CheckResult("Route/Paper Compatibility", True, f"Route '{route}' is compatible with {paper}")
    return CheckResult(
        "Route/Paper Compatibility",
        False,
        f"Route '{route}' is not compatible with {paper} (allowed: {', '.join(allowed)})",
    )


RULES: tuple[Rule, ...] = (
    check_required_fields,
    check_binding,
    check_paper,
    check_colour,
    check_route,
    check_trim_size,
    check_colour_paper_compatibility,
    check_route_paper_compatibility,
)


def validate_record(record: Record, catalog: RuleCatalog = DEFAULT_CATALOG) -> list[CheckResult]:
    results: list[CheckResult] = []
    for rule in RULES:
        result = rule(record, catalog)
        if result is not None:
            results.append(result)
    return results


__all__ = [
    "REQUIRED_FIELDS",
    "RULES",
    "check_binding",
    "check_colour",
    "check_colour_paper_compatibility",
    "check_paper",
    "check_required_fields",
    "check_route",
    "check_route_paper_compatibility",
    "check_trim_size",
    "format_millimetres",
    "parse_dimension",
    "round_millimetres",
    "validate_record",
]
