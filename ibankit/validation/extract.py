"""Split a valid IBAN into its registry-defined fields."""

from __future__ import annotations

from dataclasses import dataclass
from typing import final

from ibankit.registry.registry import CountryRegistry, resolve_registry
from ibankit.validation.formatting import electronic_format
from ibankit.validation.iban import is_valid_iban


@final
@dataclass(frozen=True, slots=True)
class IbanParts:
    """Fields of an IBAN. Only iban and valid are set when valid is False."""

    iban: str
    valid: bool
    bban: str | None = None
    country_code: str | None = None
    bank_identifier: str | None = None
    branch_identifier: str | None = None
    account_number: str | None = None


def extract_iban(value: str, *, registry: CountryRegistry | None = None) -> IbanParts:
    """Validate value (any separators allowed) and slice out its fields.

    extract_iban("NL91 ABNA 0417 1643 00").account_number -> "0417164300"
    """
    reg = resolve_registry(registry)
    iban = electronic_format(value)
    if not iban or not is_valid_iban(iban, registry=reg):
        return IbanParts(iban=iban or value, valid=False)
    country_code, bban = iban[:2], iban[4:]
    spec = reg.get(country_code)
    if spec is None:
        return IbanParts(iban=iban, valid=False)
    return IbanParts(
        iban=iban,
        valid=True,
        bban=bban,
        country_code=country_code,
        bank_identifier=None if spec.bank_identifier is None else spec.bank_identifier.slice(bban),
        branch_identifier=(
            None if spec.branch_identifier is None else spec.branch_identifier.slice(bban)
        ),
        account_number=(
            None if spec.account_identifier is None else spec.account_identifier.slice(iban)
        ),
    )
