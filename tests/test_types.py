"""Tests for ibankit.core.types: FrozenMap and IdentifierRange."""

from __future__ import annotations

import dataclasses

import pytest
from hypothesis import given
from hypothesis import strategies as st

from ibankit.core.result import Err, Ok, unwrap
from ibankit.core.types import FrozenMap, IdentifierRange

# ---------------------------------------------------------------------------
# FrozenMap
# ---------------------------------------------------------------------------


class TestFrozenMap:
    def test_sorted_iteration(self) -> None:
        fm = unwrap(FrozenMap.create({"NL": 18, "BE": 16, "DE": 22}))
        assert list(fm) == ["BE", "DE", "NL"]

    def test_lookup(self) -> None:
        fm = unwrap(FrozenMap.create({"NL": 18, "BE": 16}))
        assert fm["NL"] == 18
        assert fm.get("BE") == 16
        assert fm.get("XX") is None
        assert fm.get("XX", 0) == 0

    def test_missing_key_raises(self) -> None:
        fm = unwrap(FrozenMap.create({"NL": 18}))
        with pytest.raises(KeyError):
            fm["XX"]

    def test_contains_uncomparable_key(self) -> None:
        fm = unwrap(FrozenMap.create({"NL": 18}))
        assert 42 not in fm

    def test_from_pairs_last_wins(self) -> None:
        fm = unwrap(FrozenMap.create([("NL", 1), ("NL", 2)]))
        assert fm["NL"] == 2
        assert len(fm) == 1

    def test_uncomparable_keys_err(self) -> None:
        assert isinstance(FrozenMap.create({"a": 1, 2: 2}), Err)

    def test_empty(self) -> None:
        assert len(FrozenMap.EMPTY) == 0
        assert FrozenMap.create({}) == Ok(FrozenMap.EMPTY)

    def test_equality_ignores_insertion_order(self) -> None:
        a = unwrap(FrozenMap.create({"x": 1, "y": 2}))
        b = unwrap(FrozenMap.create({"y": 2, "x": 1}))
        assert a == b

    def test_frozen(self) -> None:
        fm = unwrap(FrozenMap.create({"x": 1}))
        with pytest.raises(dataclasses.FrozenInstanceError):
            fm._entries = ()  # type: ignore[misc]

    def test_to_dict(self) -> None:
        assert unwrap(FrozenMap.create({"x": 1})).to_dict() == {"x": 1}

    @given(st.dictionaries(st.text(max_size=3), st.integers(), max_size=20))
    def test_every_key_found(self, d: dict[str, int]) -> None:
        fm = unwrap(FrozenMap.create(d))
        assert len(fm) == len(d)
        for k, v in d.items():
            assert k in fm
            assert fm[k] == v


# ---------------------------------------------------------------------------
# IdentifierRange
# ---------------------------------------------------------------------------


class TestIdentifierRange:
    def test_parse(self) -> None:
        assert IdentifierRange.parse("8-12") == Ok(IdentifierRange(8, 12))

    def test_parse_single_character(self) -> None:
        assert IdentifierRange.parse("0-0") == Ok(IdentifierRange(0, 0))

    @pytest.mark.parametrize("raw", ["", "8", "8-", "-12", "a-b", "12-8", "8_12"])
    def test_parse_rejects(self, raw: str) -> None:
        assert isinstance(IdentifierRange.parse(raw), Err)

    def test_constructor_rejects_reversed(self) -> None:
        with pytest.raises(TypeError):
            IdentifierRange(5, 4)

    def test_slice_is_inclusive(self) -> None:
        assert IdentifierRange(0, 3).slice("ABNA0417164300") == "ABNA"

    def test_slice_past_end_truncates(self) -> None:
        assert IdentifierRange(8, 18).slice("NL91ABNA0417164300") == "0417164300"
