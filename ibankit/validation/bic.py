"""BIC / SWIFT code structure checks and field extraction.

Only the shape and the country code are checked. Whether the institution
exists is out of scope.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import final

from ibankit.core.config import BIC_PATTERN
from ibankit.core.errors import BicErrorCode
from ibankit.registry.registry import CountryRegistry, resolve_registry


@final
@dataclass(frozen=True, slots=True)
class BicValidation:
    error_codes: tuple[BicErrorCode, ...] = ()

    @property
    def valid(self) -> bool:
        return not self.error_codes

    def to_dict(self) -> dict[str, object]:
        return {"valid": self.valid, "error_codes": [c.name for c in self.error_codes]}


@final
@dataclass(frozen=True, slots=True)
class BicParts:
    """Fields of a BIC. A location code ending in "0" marks a test BIC."""

    valid: bool
    bank_code: str | None = None
    country_code: str | None = None
    location_code: str | None = None
    branch_code: str | None = None
    test_bic: bool = False


def is_valid_bic(bic: str | None, *, registry: CountryRegistry | None = None) -> bool:
    """is_valid_bic("ABNANL2A") -> True"""
    if not bic:
        return False
    return (
        BIC_PATTERN.fullmatch(bic) is not None
        and bic.upper()[4:6] in resolve_registry(registry)
    )


def validate_bic(bic: str | None, *, registry: CountryRegistry | None = None) -> BicValidation:
    if not bic:
        return BicValidation((BicErrorCode.NO_BIC_PROVIDED,))
    if bic.upper()[4:6] not in resolve_registry(registry):
        return BicValidation((BicErrorCode.UNKNOWN_COUNTRY,))
    if BIC_PATTERN.fullmatch(bic) is None:
        return BicValidation((BicErrorCode.WRONG_BIC_FORMAT,))
    return BicValidation()


def extract_bic(value: str, *, registry: CountryRegistry | None = None) -> BicParts:
    """extract_bic("NEDSZAJJXXX").branch_code -> "XXX" """
    bic = value.upper()
    if not is_valid_bic(bic, registry=registry):
        return BicParts(valid=False)
    location = bic[6:8]
    return BicParts(
        valid=True,
        bank_code=bic[:4],
        country_code=bic[4:6],
        location_code=location,
        branch_code=bic[8:] if len(bic) > 8 else None,
        test_bic=location[1] == "0",
    )
