"""Country specification records.

CountrySpec is the full internal record; CountrySpecView is the public,
read-only projection handed to callers.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import final

from ibankit.checksum.national import BbanAlgorithm
from ibankit.core.types import IdentifierRange

# One "[class]{n}" segment of a BBAN pattern.
_SEGMENT = re.compile(r"\[[^\]]+\]\{(\d+)\}")
_SHAPE = re.compile(r"\^(?:\[[^\]]+\]\{\d+\})+\$")


def pattern_length(pattern: str) -> int | None:
    """Number of characters a segment-only BBAN pattern accepts.

    Returns None for patterns that are not anchored sequences of
    "[class]{n}" segments.
    """
    if not _SHAPE.fullmatch(pattern):
        return None
    return sum(int(n) for n in _SEGMENT.findall(pattern))


@final
@dataclass(frozen=True, slots=True)
class CountrySpec:
    """Structural rules for one country code.

    length is the full IBAN length (country + check digits + BBAN).
    A spec without length or bban_pattern carries no structural rule.
    bank_identifier and branch_identifier index into the BBAN;
    account_identifier indexes into the electronic IBAN.
    """

    code: str
    length: int | None = None
    bban_pattern: str | None = None
    algorithm: BbanAlgorithm | None = None
    iban_registry: bool = False
    sepa: bool = False
    bank_identifier: IdentifierRange | None = None
    branch_identifier: IdentifierRange | None = None
    account_identifier: IdentifierRange | None = None

    @property
    def has_structure(self) -> bool:
        return self.length is not None and self.bban_pattern is not None

    @property
    def bban_length(self) -> int | None:
        return None if self.length is None else self.length - 4

    def matches_pattern(self, bban: str) -> bool:
        return self.bban_pattern is not None and re.fullmatch(self.bban_pattern, bban) is not None

    def view(self) -> CountrySpecView:
        return CountrySpecView(
            length=self.length,
            bban_pattern=self.bban_pattern,
            iban_registry=self.iban_registry,
            sepa=self.sepa,
        )


@final
@dataclass(frozen=True, slots=True)
class CountrySpecView:
    """What callers may see of a CountrySpec. No validator references."""

    length: int | None
    bban_pattern: str | None
    iban_registry: bool
    sepa: bool
