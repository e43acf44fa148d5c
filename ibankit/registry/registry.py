"""Country specification registry.

The registry owns the specification table and the caller-registered BBAN
validators. Validation functions take a registry explicitly or fall back to
default_registry(), the process-wide instance built from COUNTRY_SPECS.

Usage at application startup::

    registry = default_registry()
    registry.register_validator("DE", check_german_account)
    registry.upsert(CountrySpec(code="XX", length=24, bban_pattern="^[0-9]{20}$"))

Mutations are copy-on-write: each one builds a new dict and swaps the
reference, so a concurrent reader sees either the old or the new table. The
registry expects a single writer, normally during startup.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import final

from ibankit.checksum.national import ALGORITHMS, BbanValidator
from ibankit.core.errors import RegistryError
from ibankit.core.result import Err, Ok, unwrap
from ibankit.core.serialization import canonical_bytes, content_hash
from ibankit.core.types import FrozenMap
from ibankit.registry.countries import COUNTRY_SPECS
from ibankit.registry.spec import CountrySpec, CountrySpecView, pattern_length

logger = logging.getLogger(__name__)

_COUNTRY_CODE = re.compile(r"[A-Z]{2}")


def _registry_error(code: str, message: str) -> Err[RegistryError]:
    return Err(RegistryError(
        message=message, code="REGISTRY_REJECTED",
        source="registry.upsert", country_code=code,
    ))


def _check_spec(spec: CountrySpec) -> Err[RegistryError] | None:
    """Return Err if spec breaks a table invariant, else None."""
    if not _COUNTRY_CODE.fullmatch(spec.code):
        return _registry_error(
            spec.code, f"Country code must be 2 uppercase letters, got '{spec.code}'",
        )
    if (spec.length is None) != (spec.bban_pattern is None):
        return _registry_error(spec.code, "length and bban_pattern must be given together")
    if spec.bban_pattern is None:
        if spec.algorithm is not None:
            return _registry_error(spec.code, "A BBAN algorithm requires a bban_pattern")
        return None
    try:
        re.compile(spec.bban_pattern)
    except re.error as e:
        return _registry_error(spec.code, f"bban_pattern does not compile: {e}")
    implied = pattern_length(spec.bban_pattern)
    if implied is None:
        return _registry_error(
            spec.code,
            f"bban_pattern must be anchored [class]{{n}} segments, got '{spec.bban_pattern}'",
        )
    if spec.length != implied + 4:
        return _registry_error(
            spec.code, f"length {spec.length} does not match pattern length {implied} + 4",
        )
    return None


@final
@dataclass
class CountryRegistry:
    """Specification table plus caller-registered BBAN validators.

    Caller validators are kept beside the table, never inside a CountrySpec,
    so the table stays serializable. A caller validator takes precedence
    over the spec's built-in algorithm.
    """

    _specs: dict[str, CountrySpec] = field(default_factory=dict)
    _overrides: dict[str, BbanValidator] = field(default_factory=dict)

    @staticmethod
    def from_specs(specs: Iterable[CountrySpec]) -> CountryRegistry:
        return CountryRegistry(_specs={spec.code: spec for spec in specs})

    @staticmethod
    def builtin() -> CountryRegistry:
        """A fresh registry holding the built-in table."""
        return CountryRegistry.from_specs(spec for _, spec in COUNTRY_SPECS.items())

    def get(self, code: str | None) -> CountrySpec | None:
        """Exact, case-sensitive lookup. None for unknown codes."""
        if code is None:
            return None
        return self._specs.get(code)

    def __contains__(self, code: object) -> bool:
        return code in self._specs

    def __len__(self) -> int:
        return len(self._specs)

    def bban_validator(self, code: str) -> BbanValidator | None:
        """Caller validator, else the built-in algorithm, else None."""
        override = self._overrides.get(code)
        if override is not None:
            return override
        spec = self._specs.get(code)
        if spec is None or spec.algorithm is None:
            return None
        return ALGORITHMS[spec.algorithm]

    def register_validator(self, code: str, validator: BbanValidator) -> bool:
        """Install validator for an existing country. False if code is unknown.

        Replaces any validator registered earlier for the same code.
        """
        if code not in self._specs:
            logger.warning("Refused BBAN validator for unknown country %r", code)
            return False
        self._overrides = {**self._overrides, code: validator}
        logger.info("Registered custom BBAN validator for %s", code)
        return True

    def upsert(self, spec: CountrySpec) -> Ok[CountrySpec] | Err[RegistryError]:
        """Add or replace a country specification after checking invariants."""
        rejected = _check_spec(spec)
        if rejected is not None:
            logger.warning("Rejected specification for %r: %s", spec.code, rejected.error.message)
            return rejected
        replaced = spec.code in self._specs
        self._specs = {**self._specs, spec.code: spec}
        logger.info("%s specification for %s", "Replaced" if replaced else "Added", spec.code)
        return Ok(spec)

    def specifications(self) -> FrozenMap[str, CountrySpecView]:
        """Read-only projection of every entry, without validator references."""
        return unwrap(FrozenMap.create({code: spec.view() for code, spec in self._specs.items()}))

    def export(self) -> Ok[bytes] | Err[str]:
        """Canonical JSON bytes of specifications()."""
        return canonical_bytes(self.specifications())

    def fingerprint(self) -> Ok[str] | Err[str]:
        """SHA-256 of export(); changes whenever the public table changes."""
        return content_hash(self.specifications())


_DEFAULT_REGISTRY: CountryRegistry = CountryRegistry.builtin()


def default_registry() -> CountryRegistry:
    """The process-wide registry used when no registry is passed."""
    return _DEFAULT_REGISTRY


def resolve_registry(registry: CountryRegistry | None) -> CountryRegistry:
    """registry itself, or default_registry() when None.

    An empty registry is falsy (it has __len__), so callers must not use
    `registry or default_registry()`.
    """
    return default_registry() if registry is None else registry
