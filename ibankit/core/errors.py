"""Error codes and error values. No validation function raises.

Validation outcomes are reported through IbanErrorCode / BicErrorCode lists.
Misuse of the specification registry is reported through RegistryError
values wrapped in Err.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import final


class IbanErrorCode(Enum):
    """Reasons an IBAN failed validation. Values are stable identifiers."""

    NO_IBAN_PROVIDED = 0
    UNKNOWN_COUNTRY = 1
    WRONG_BBAN_LENGTH = 2
    WRONG_BBAN_FORMAT = 3
    CHECKSUM_NOT_NUMERIC = 4
    WRONG_IBAN_CHECKSUM = 5
    WRONG_BBAN_CHECKSUM = 6
    QR_IBAN_NOT_ALLOWED = 7


class BicErrorCode(Enum):
    """Reasons a BIC failed validation."""

    NO_BIC_PROVIDED = 0
    UNKNOWN_COUNTRY = 1
    WRONG_BIC_FORMAT = 2


@dataclass(frozen=True, slots=True)
class IbankitError:
    """Base error value. NOT @final, has subclasses."""

    message: str
    code: str
    source: str  # "module.function" that produced this error

    def with_context(self, context: str) -> IbankitError:
        """Return a copy with context prepended to message."""
        return replace(self, message=f"{context}: {self.message}")

    def to_dict(self) -> dict[str, object]:
        return {
            "message": self.message,
            "code": self.code,
            "source": self.source,
        }


@final
@dataclass(frozen=True, slots=True)
class RegistryError(IbankitError):
    """A country specification could not be added to the registry."""

    country_code: str

    def to_dict(self) -> dict[str, object]:
        return {**IbankitError.to_dict(self), "country_code": self.country_code}
