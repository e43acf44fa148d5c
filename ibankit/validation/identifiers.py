"""Validated identifier newtypes: Iban, Bic.

Each wraps a string validated at construction time via parse(). parse()
accepts separators and lowercase and stores the electronic form.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import final

from ibankit.core.config import DEFAULT_OPTIONS, ValidationOptions
from ibankit.core.errors import IbanErrorCode
from ibankit.core.result import Err, Ok
from ibankit.registry.registry import CountryRegistry
from ibankit.validation.bic import BicValidation, validate_bic
from ibankit.validation.formatting import electronic_format, friendly_format
from ibankit.validation.iban import IbanValidation, validate_iban


@final
@dataclass(frozen=True, slots=True)
class Iban:
    """International Bank Account Number, electronic format."""

    value: str

    @staticmethod
    def parse(
        raw: str,
        options: ValidationOptions = DEFAULT_OPTIONS,
        *,
        registry: CountryRegistry | None = None,
    ) -> Ok[Iban] | Err[IbanValidation]:
        electronic = electronic_format(raw)
        if not electronic:
            return Err(IbanValidation((IbanErrorCode.NO_IBAN_PROVIDED,)))
        result = validate_iban(electronic, options, registry=registry)
        if not result.valid:
            return Err(result)
        return Ok(Iban(value=electronic))

    @property
    def country_code(self) -> str:
        return self.value[:2]

    @property
    def check_digits(self) -> str:
        return self.value[2:4]

    @property
    def bban(self) -> str:
        return self.value[4:]

    def friendly(self, separator: str = " ") -> str:
        return friendly_format(self.value, separator) or self.value


@final
@dataclass(frozen=True, slots=True)
class Bic:
    """Business Identifier Code, 8 or 11 characters, uppercase."""

    value: str

    @staticmethod
    def parse(
        raw: str, *, registry: CountryRegistry | None = None,
    ) -> Ok[Bic] | Err[BicValidation]:
        result = validate_bic(raw, registry=registry)
        if not result.valid:
            return Err(result)
        return Ok(Bic(value=raw.upper()))
