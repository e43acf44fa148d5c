"""IBAN and BBAN validation, composition and country queries.

validate_iban runs every check and reports all failures; is_valid_iban
answers the same question with a single bool. Neither raises on bad input.

Pipeline (validate_iban):
  1. missing input              -> NO_IBAN_PROVIDED, stop
  2. unknown/unstructured country -> UNKNOWN_COUNTRY, stop
  3. length                     -> WRONG_BBAN_LENGTH
  4. BBAN pattern               -> WRONG_BBAN_FORMAT
  5. national BBAN check        -> WRONG_BBAN_CHECKSUM
  6. check digits are digits    -> CHECKSUM_NOT_NUMERIC
  7. format error or mod-97     -> WRONG_IBAN_CHECKSUM
  8. QR-IBAN policy             -> QR_IBAN_NOT_ALLOWED
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import final

from ibankit.checksum.mod97 import generate_check_digits, verify_check_digits
from ibankit.checksum.national import BbanValidator
from ibankit.core.config import (
    BBAN_STRIP_PATTERN,
    CHECK_DIGITS_PATTERN,
    DEFAULT_OPTIONS,
    QR_IBAN_COUNTRIES,
    QR_IBAN_PATTERN,
    ValidationOptions,
)
from ibankit.core.errors import IbanErrorCode
from ibankit.core.result import Ok
from ibankit.core.types import FrozenMap
from ibankit.registry.registry import CountryRegistry, resolve_registry
from ibankit.registry.spec import CountrySpecView
from ibankit.validation.formatting import electronic_format


@final
@dataclass(frozen=True, slots=True)
class IbanValidation:
    """All reasons an IBAN failed, in pipeline order. Empty means valid."""

    error_codes: tuple[IbanErrorCode, ...] = ()

    @property
    def valid(self) -> bool:
        return not self.error_codes

    def to_dict(self) -> dict[str, object]:
        return {"valid": self.valid, "error_codes": [c.name for c in self.error_codes]}


def is_qr_iban(iban: str | None) -> bool:
    """True for a CH/LI IBAN whose QR-IID (iban[4:9]) is 30000-31999."""
    if iban is None or iban[:2] not in QR_IBAN_COUNTRIES:
        return False
    return QR_IBAN_PATTERN.fullmatch(iban[4:9]) is not None


def is_valid_bban(
    bban: str | None, country_code: str | None, *, registry: CountryRegistry | None = None,
) -> bool:
    """Length, pattern and national check of a BBAN for country_code."""
    if bban is None or country_code is None:
        return False
    reg = resolve_registry(registry)
    spec = reg.get(country_code)
    if spec is None or not spec.has_structure:
        return False
    if len(bban) != spec.bban_length or not spec.matches_pattern(bban):
        return False
    validator = reg.bban_validator(country_code)
    return validator is None or validator(BBAN_STRIP_PATTERN.sub("", bban))


def is_valid_iban(
    iban: str | None,
    options: ValidationOptions = DEFAULT_OPTIONS,
    *,
    registry: CountryRegistry | None = None,
) -> bool:
    """True iff iban passes every check. Expects the electronic format.

    is_valid_iban("NL91ABNA0417164300") -> True
    """
    if iban is None:
        return False
    reg = resolve_registry(registry)
    spec = reg.get(iban[:2])
    if spec is None or not spec.has_structure:
        return False
    return (
        spec.length == len(iban)
        and CHECK_DIGITS_PATTERN.fullmatch(iban[2:4]) is not None
        and is_valid_bban(iban[4:], iban[:2], registry=reg)
        and verify_check_digits(iban)
        and (options.allow_qr_iban or not is_qr_iban(iban))
    )


def validate_iban(
    iban: str | None,
    options: ValidationOptions = DEFAULT_OPTIONS,
    *,
    registry: CountryRegistry | None = None,
) -> IbanValidation:
    """Run the whole pipeline and collect every failure."""
    if not iban:
        return IbanValidation((IbanErrorCode.NO_IBAN_PROVIDED,))
    reg = resolve_registry(registry)
    country_code, bban = iban[:2], iban[4:]
    spec = reg.get(country_code)
    if spec is None or not spec.has_structure:
        return IbanValidation((IbanErrorCode.UNKNOWN_COUNTRY,))

    errors: list[IbanErrorCode] = []
    if spec.length != len(iban):
        errors.append(IbanErrorCode.WRONG_BBAN_LENGTH)
    if not spec.matches_pattern(bban):
        errors.append(IbanErrorCode.WRONG_BBAN_FORMAT)
    validator: BbanValidator | None = reg.bban_validator(country_code)
    if validator is not None and not validator(bban):
        errors.append(IbanErrorCode.WRONG_BBAN_CHECKSUM)
    if CHECK_DIGITS_PATTERN.fullmatch(iban[2:4]) is None:
        errors.append(IbanErrorCode.CHECKSUM_NOT_NUMERIC)
    if IbanErrorCode.WRONG_BBAN_FORMAT in errors or not verify_check_digits(iban):
        errors.append(IbanErrorCode.WRONG_IBAN_CHECKSUM)
    if not options.allow_qr_iban and is_qr_iban(iban):
        errors.append(IbanErrorCode.QR_IBAN_NOT_ALLOWED)
    return IbanValidation(tuple(errors))


def compose_iban(
    country_code: str | None, bban: str | None, *, registry: CountryRegistry | None = None,
) -> str | None:
    """Build an IBAN from country code and BBAN, or None if they do not fit.

    Only the structure (length and pattern) is checked before the check
    digits are generated; the national BBAN check is not applied.

    compose_iban("NL", "ABNA0417164300") -> "NL91ABNA0417164300"
    """
    electronic = electronic_format(bban)
    if country_code is None or not electronic:
        return None
    spec = resolve_registry(registry).get(country_code)
    if spec is None or not spec.has_structure:
        return None
    if len(electronic) != spec.bban_length or not spec.matches_pattern(electronic):
        return None
    match generate_check_digits(country_code, electronic):
        case Ok(check):
            return f"{country_code}{check}{electronic}"
        case _:
            return None


def register_bban_validator(
    country_code: str, validator: BbanValidator, *, registry: CountryRegistry | None = None,
) -> bool:
    """Install a custom BBAN check for an existing country. False if unknown."""
    return resolve_registry(registry).register_validator(country_code, validator)


def country_specifications(
    *, registry: CountryRegistry | None = None,
) -> FrozenMap[str, CountrySpecView]:
    """Public view of every country, including those without structure."""
    return resolve_registry(registry).specifications()


def is_sepa_country(country_code: str | None, *, registry: CountryRegistry | None = None) -> bool:
    spec = resolve_registry(registry).get(country_code)
    return spec is not None and spec.sepa
