import pytest

from printspec.core.catalog import DEFAULT_CATALOG, PaperCompatibility, RuleCatalog, is_valid
from printspec.core.errors import CatalogIntegrityError, ConfigurationInvariantViolation


def test_every_valid_paper_has_compatibility_rules() -> None:
    assert set(DEFAULT_CATALOG.paper_compatibility) == set(DEFAULT_CATALOG.valid_papers)


def test_compatibility_values_are_members_of_their_catalog_sets() -> None:
    for rules in DEFAULT_CATALOG.paper_compatibility.values():
        assert set(rules.allowed_colours) <= set(DEFAULT_CATALOG.valid_colours)
        assert set(rules.allowed_routes) <= set(DEFAULT_CATALOG.valid_routes)


def test_is_valid_is_exact_membership() -> None:
    assert is_valid(DEFAULT_CATALOG.valid_colours, "Mono") is True
    assert is_valid(DEFAULT_CATALOG.valid_colours, "mono") is False
    assert is_valid(DEFAULT_CATALOG.valid_colours, " Mono") is False
    assert is_valid(DEFAULT_CATALOG.valid_colours, None) is False


def test_trim_sizes_keep_declared_order() -> None:
    assert DEFAULT_CATALOG.valid_trim_sizes[:3] == ("140x216", "152x229", "156x234")
    assert DEFAULT_CATALOG.valid_trim_sizes[-1] == "216x280"


def test_compatibility_for_known_paper() -> None:
    rules = DEFAULT_CATALOG.compatibility_for("Magno Matt 90 gsm")
    assert rules == PaperCompatibility(allowed_colours=("Mono", "Colour"), allowed_routes=("Premium",))


def test_compatibility_table_is_read_only() -> None:
    with pytest.raises(TypeError):
        DEFAULT_CATALOG.paper_compatibility["Bond"] = PaperCompatibility(("Mono",), ("Standard",))  # type: ignore[index]
    assert "Bond" not in DEFAULT_CATALOG.paper_compatibility


def test_catalog_copies_the_compatibility_table() -> None:
    table = {"Bond": PaperCompatibility(("Mono",), ("Standard",))}
    catalog = RuleCatalog(
        valid_bindings=("Cased",),
        valid_papers=("Bond",),
        valid_colours=("Mono",),
        valid_routes=("Standard",),
        valid_trim_sizes=("140x216",),
        paper_compatibility=table,
    )
    table.clear()
    assert catalog.compatibility_for("Bond").allowed_routes == ("Standard",)


def test_catalog_rejects_paper_without_compatibility_rules() -> None:
    with pytest.raises(CatalogIntegrityError, match="Papers without compatibility rules: Bond"):
        RuleCatalog(
            valid_bindings=("Cased",),
            valid_papers=("Bond",),
            valid_colours=("Mono",),
            valid_routes=("Standard",),
            valid_trim_sizes=("100x200",),
            paper_compatibility={},
        )


def test_catalog_rejects_rules_for_unlisted_paper() -> None:
    with pytest.raises(ConfigurationInvariantViolation):
        RuleCatalog(
            valid_bindings=("Cased",),
            valid_papers=(),
            valid_colours=("Mono",),
            valid_routes=("Standard",),
            valid_trim_sizes=("100x200",),
            paper_compatibility={"Bond": PaperCompatibility(("Mono",), ("Standard",))},
        )


def test_to_dict_lists_values_in_order() -> None:
    payload = DEFAULT_CATALOG.to_dict()
    assert payload["valid_bindings"] == ["Cased", "Limp"]
    assert payload["paper_compatibility"]["Clairjet 90 gsm"] == {
        "allowed_colours": ["Colour"],
        "allowed_routes": ["Standard"],
    }
