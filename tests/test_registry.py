"""Tests for ibankit.registry: country table, CountrySpec, CountryRegistry."""

from __future__ import annotations

import json
import logging

import pytest
from conftest import STRUCTURED, UNSTRUCTURED_CODES

from ibankit.checksum.national import BbanAlgorithm, check_norway
from ibankit.core.errors import RegistryError
from ibankit.core.result import Err, Ok, unwrap
from ibankit.core.types import IdentifierRange
from ibankit.registry.countries import COUNTRY_SPECS
from ibankit.registry.registry import CountryRegistry, default_registry, resolve_registry
from ibankit.registry.spec import CountrySpec, CountrySpecView, pattern_length
from ibankit.validation.iban import compose_iban, is_valid_iban

XX = CountrySpec(code="XX", length=24, bban_pattern="^[0-9]{20}$")

# ---------------------------------------------------------------------------
# pattern_length / CountrySpec
# ---------------------------------------------------------------------------


class TestPatternLength:
    def test_single_segment(self) -> None:
        assert pattern_length("^[0-9]{14}$") == 14

    def test_several_segments(self) -> None:
        assert pattern_length("^[A-Z]{4}[0-9]{6}[A-Z0-9]{8}$") == 18

    def test_unanchored(self) -> None:
        assert pattern_length("[0-9]{14}") is None

    def test_shorthand_class(self) -> None:
        assert pattern_length(r"^\d{14}$") is None

    def test_alternation(self) -> None:
        assert pattern_length("^[0-9]{4}|[A-Z]{4}$") is None


class TestCountrySpec:
    def test_structure(self) -> None:
        assert XX.has_structure
        assert XX.bban_length == 20

    def test_no_structure(self) -> None:
        spec = CountrySpec(code="US")
        assert not spec.has_structure
        assert spec.bban_length is None
        assert not spec.matches_pattern("123")

    def test_matches_whole_string_only(self) -> None:
        assert XX.matches_pattern("0" * 20)
        assert not XX.matches_pattern("0" * 20 + "\n")
        assert not XX.matches_pattern("0" * 19)

    def test_view_drops_internal_fields(self) -> None:
        spec = COUNTRY_SPECS["NO"]
        assert spec.view() == CountrySpecView(
            length=15, bban_pattern="^[0-9]{11}$", iban_registry=True, sepa=True,
        )


# ---------------------------------------------------------------------------
# Built-in table
# ---------------------------------------------------------------------------


class TestBuiltinTable:
    def test_length_matches_pattern_everywhere(self) -> None:
        for spec in STRUCTURED:
            assert spec.bban_pattern is not None
            assert pattern_length(spec.bban_pattern) == spec.bban_length, spec.code

    def test_codes_are_two_uppercase_letters(self) -> None:
        for code in COUNTRY_SPECS:
            assert len(code) == 2 and code.isascii() and code.isupper(), code

    def test_unstructured_entries_have_no_algorithm(self) -> None:
        for code in UNSTRUCTURED_CODES:
            spec = COUNTRY_SPECS[code]
            assert spec.algorithm is None
            assert spec.length is None
            assert spec.bban_pattern is None

    def test_algorithm_assignment(self) -> None:
        expected = {
            "NO": BbanAlgorithm.NORWAY,
            "BE": BbanAlgorithm.BELGIUM,
            "PL": BbanAlgorithm.POLAND,
            "ES": BbanAlgorithm.SPAIN,
            "HR": BbanAlgorithm.CROATIA,
            "CZ": BbanAlgorithm.CZECH_SLOVAK,
            "SK": BbanAlgorithm.CZECH_SLOVAK,
            "EE": BbanAlgorithm.ESTONIA,
            "FR": BbanAlgorithm.FRANCE,
            "MC": BbanAlgorithm.FRANCE,
            "HU": BbanAlgorithm.HUNGARY,
            "SI": BbanAlgorithm.MOD97,
            "BA": BbanAlgorithm.MOD97,
            "ME": BbanAlgorithm.MOD97,
            "MK": BbanAlgorithm.MOD97,
            "PT": BbanAlgorithm.MOD97,
            "RS": BbanAlgorithm.MOD97,
        }
        for code, algorithm in expected.items():
            assert COUNTRY_SPECS[code].algorithm is algorithm, code

    def test_known_lengths(self) -> None:
        assert COUNTRY_SPECS["NL"].length == 18
        assert COUNTRY_SPECS["DE"].length == 22
        assert COUNTRY_SPECS["MT"].length == 31
        assert COUNTRY_SPECS["NO"].length == 15

    def test_identifier_ranges(self) -> None:
        assert COUNTRY_SPECS["NL"].bank_identifier == IdentifierRange(0, 3)
        assert COUNTRY_SPECS["NL"].branch_identifier is None


# ---------------------------------------------------------------------------
# CountryRegistry lookups
# ---------------------------------------------------------------------------


class TestLookup:
    def test_builtin_size(self, registry: CountryRegistry) -> None:
        assert len(registry) == len(COUNTRY_SPECS)

    def test_get(self, registry: CountryRegistry) -> None:
        spec = registry.get("NL")
        assert spec is not None
        assert spec.length == 18

    def test_get_is_case_sensitive(self, registry: CountryRegistry) -> None:
        assert registry.get("nl") is None

    def test_get_none(self, registry: CountryRegistry) -> None:
        assert registry.get(None) is None

    def test_contains(self, registry: CountryRegistry) -> None:
        assert "US" in registry
        assert "XX" not in registry

    def test_builtin_validator(self, registry: CountryRegistry) -> None:
        assert registry.bban_validator("NO") is check_norway

    def test_no_validator(self, registry: CountryRegistry) -> None:
        assert registry.bban_validator("NL") is None
        assert registry.bban_validator("XX") is None

    def test_from_specs(self) -> None:
        reg = CountryRegistry.from_specs([XX])
        assert len(reg) == 1
        assert reg.get("XX") == XX


class TestResolveRegistry:
    def test_none_is_default(self) -> None:
        assert resolve_registry(None) is default_registry()

    def test_empty_registry_is_kept(self) -> None:
        empty = CountryRegistry()
        assert resolve_registry(empty) is empty

    def test_empty_registry_knows_nothing(self) -> None:
        assert not is_valid_iban("NL91ABNA0417164300", registry=CountryRegistry())


# ---------------------------------------------------------------------------
# Mutation
# ---------------------------------------------------------------------------


class TestRegisterValidator:
    def test_known_country(self, registry: CountryRegistry) -> None:
        assert registry.register_validator("DE", lambda _: False)
        validator = registry.bban_validator("DE")
        assert validator is not None
        assert validator("370400440532013000") is False

    def test_unknown_country(self, registry: CountryRegistry) -> None:
        assert not registry.register_validator("XY", lambda _: True)
        assert registry.bban_validator("XY") is None

    def test_later_registration_wins(self, registry: CountryRegistry) -> None:
        registry.register_validator("NL", lambda _: False)
        registry.register_validator("NL", lambda _: True)
        validator = registry.bban_validator("NL")
        assert validator is not None
        assert validator("anything")

    def test_logs_refusal(
        self, registry: CountryRegistry, caplog: pytest.LogCaptureFixture,
    ) -> None:
        with caplog.at_level(logging.WARNING, logger="ibankit.registry.registry"):
            registry.register_validator("XY", lambda _: True)
        assert "XY" in caplog.text

    def test_table_unchanged(self, registry: CountryRegistry) -> None:
        before = unwrap(registry.fingerprint())
        registry.register_validator("DE", lambda _: False)
        assert unwrap(registry.fingerprint()) == before


class TestUpsert:
    def test_add_new_country(self, registry: CountryRegistry) -> None:
        assert registry.upsert(XX) == Ok(XX)
        spec = registry.get("XX")
        assert spec is not None
        assert not spec.sepa
        assert "XX" in registry.specifications()

    def test_new_country_is_usable(self, registry: CountryRegistry) -> None:
        registry.upsert(XX)
        iban = compose_iban("XX", "12345678901234567890", registry=registry)
        assert iban is not None
        assert is_valid_iban(iban, registry=registry)
        assert not is_valid_iban(iban)

    def test_default_registry_unaffected(self, registry: CountryRegistry) -> None:
        registry.upsert(XX)
        assert "XX" not in default_registry()

    def test_replace_existing(self, registry: CountryRegistry) -> None:
        size = len(registry)
        replacement = CountrySpec(code="NL", length=18, bban_pattern="^[0-9]{14}$")
        assert isinstance(registry.upsert(replacement), Ok)
        assert len(registry) == size
        assert not is_valid_iban("NL91ABNA0417164300", registry=registry)

    def test_unstructured_entry(self, registry: CountryRegistry) -> None:
        assert isinstance(registry.upsert(CountrySpec(code="XQ")), Ok)
        assert "XQ" in registry

    @pytest.mark.parametrize("spec", [
        CountrySpec(code="xx", length=24, bban_pattern="^[0-9]{20}$"),
        CountrySpec(code="X1", length=24, bban_pattern="^[0-9]{20}$"),
        CountrySpec(code="XXX", length=24, bban_pattern="^[0-9]{20}$"),
        CountrySpec(code="XX", length=24),
        CountrySpec(code="XX", bban_pattern="^[0-9]{20}$"),
        CountrySpec(code="XX", algorithm=BbanAlgorithm.MOD97),
        CountrySpec(code="XX", length=24, bban_pattern="^[0-9{20}$"),
        CountrySpec(code="XX", length=24, bban_pattern=r"^\d{20}$"),
        CountrySpec(code="XX", length=25, bban_pattern="^[0-9]{20}$"),
    ])
    def test_rejected(self, registry: CountryRegistry, spec: CountrySpec) -> None:
        size = len(registry)
        result = registry.upsert(spec)
        assert isinstance(result, Err)
        assert isinstance(result.error, RegistryError)
        assert result.error.country_code == spec.code
        assert len(registry) == size

    def test_error_to_dict(self, registry: CountryRegistry) -> None:
        result = registry.upsert(CountrySpec(code="XX", length=25, bban_pattern="^[0-9]{20}$"))
        assert isinstance(result, Err)
        d = result.error.to_dict()
        assert d["country_code"] == "XX"
        assert d["source"] == "registry.upsert"

    def test_logs_addition(
        self, registry: CountryRegistry, caplog: pytest.LogCaptureFixture,
    ) -> None:
        with caplog.at_level(logging.INFO, logger="ibankit.registry.registry"):
            registry.upsert(XX)
        assert "Added specification for XX" in caplog.text


# ---------------------------------------------------------------------------
# Projection and export
# ---------------------------------------------------------------------------


class TestSpecifications:
    def test_every_code_present(self, registry: CountryRegistry) -> None:
        assert set(registry.specifications()) == set(COUNTRY_SPECS)

    def test_values_are_views(self, registry: CountryRegistry) -> None:
        for _, view in registry.specifications().items():
            assert isinstance(view, CountrySpecView)

    def test_custom_validator_not_exposed(self, registry: CountryRegistry) -> None:
        before = registry.specifications()
        registry.register_validator("DE", lambda _: False)
        assert registry.specifications() == before


class TestExport:
    def test_json_round_trip(self, registry: CountryRegistry) -> None:
        data = json.loads(unwrap(registry.export()))
        assert data["NL"] == {
            "length": 18,
            "bban_pattern": "^[A-Z]{4}[0-9]{10}$",
            "iban_registry": True,
            "sepa": True,
        }
        assert data["US"]["length"] is None

    def test_fingerprint_stable(self) -> None:
        first = unwrap(CountryRegistry.builtin().fingerprint())
        second = unwrap(CountryRegistry.builtin().fingerprint())
        assert first == second
        assert len(first) == 64

    def test_fingerprint_changes_on_upsert(self, registry: CountryRegistry) -> None:
        before = unwrap(registry.fingerprint())
        registry.upsert(XX)
        assert unwrap(registry.fingerprint()) != before
