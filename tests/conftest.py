"""Hypothesis strategies and pytest fixtures for ibankit.

Strategies draw country codes and BBANs straight from the built-in table,
so every structured country is exercised.
"""

from __future__ import annotations

import pytest
from hypothesis import HealthCheck, settings
from hypothesis import strategies as st
from hypothesis.strategies import SearchStrategy

from ibankit.registry.countries import COUNTRY_SPECS
from ibankit.registry.registry import CountryRegistry
from ibankit.registry.spec import CountrySpec

# ---------------------------------------------------------------------------
# Hypothesis global settings
# ---------------------------------------------------------------------------

settings.register_profile(
    "ci",
    max_examples=200,
    suppress_health_check=[HealthCheck.too_slow],
    deadline=None,
)
settings.register_profile(
    "dev",
    max_examples=50,
    suppress_health_check=[HealthCheck.too_slow],
    deadline=None,
)
settings.load_profile("dev")


# ===================================================================
# TABLE SLICES
# ===================================================================

STRUCTURED: tuple[CountrySpec, ...] = tuple(
    spec for _, spec in COUNTRY_SPECS.items() if spec.has_structure
)
UNSTRUCTURED_CODES: tuple[str, ...] = tuple(
    code for code, spec in COUNTRY_SPECS.items() if not spec.has_structure
)
# Countries whose BBAN carries no national check digit.
PLAIN: tuple[CountrySpec, ...] = tuple(spec for spec in STRUCTURED if spec.algorithm is None)


# ===================================================================
# PRIMITIVE STRATEGIES
# ===================================================================


def digit_strings(min_size: int = 1, max_size: int = 60) -> SearchStrategy[str]:
    """ASCII decimal strings, leading zeros allowed."""
    return st.text(alphabet="0123456789", min_size=min_size, max_size=max_size)


def unknown_codes() -> SearchStrategy[str]:
    """Two-character codes that are not keys of the built-in table."""
    return st.text(
        alphabet="ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789 .-",
        min_size=2, max_size=2,
    ).filter(lambda c: c not in COUNTRY_SPECS)


# ===================================================================
# TABLE-DRIVEN STRATEGIES
# ===================================================================


@st.composite
def plain_country_bbans(draw: st.DrawFn) -> tuple[str, str]:
    """(country code, BBAN) pairs matching the country's pattern."""
    spec = draw(st.sampled_from(PLAIN))
    assert spec.bban_pattern is not None
    bban = draw(st.from_regex(spec.bban_pattern, fullmatch=True))
    return spec.code, bban


@st.composite
def structured_country_bbans(draw: st.DrawFn) -> tuple[str, str]:
    """Like plain_country_bbans, across every structured country."""
    spec = draw(st.sampled_from(STRUCTURED))
    assert spec.bban_pattern is not None
    bban = draw(st.from_regex(spec.bban_pattern, fullmatch=True))
    return spec.code, bban


# ===================================================================
# FIXTURES
# ===================================================================


@pytest.fixture
def registry() -> CountryRegistry:
    """A private copy of the built-in table. Safe to mutate."""
    return CountryRegistry.builtin()
