"""Validation options and fixed constants.

No environment variables are read. Pure configuration data.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import final

# ---------------------------------------------------------------------------
# Checksum engine
# ---------------------------------------------------------------------------

# 6 digits keeps remainder * 10**6 + chunk far below 2**53, so the reduction
# stays exact in any numeric runtime the table is shared with.
MOD97_CHUNK_SIZE: int = 6

CHECK_DIGITS_PATTERN: re.Pattern[str] = re.compile(r"[0-9]{2}")

# ---------------------------------------------------------------------------
# QR-IBAN
# ---------------------------------------------------------------------------

QR_IBAN_COUNTRIES: frozenset[str] = frozenset({"CH", "LI"})

# Applied to iban[4:9], the QR-IID.
QR_IBAN_PATTERN: re.Pattern[str] = re.compile(r"3[01][0-9]{3}")

# ---------------------------------------------------------------------------
# Formatting
# ---------------------------------------------------------------------------

FRIENDLY_GROUP_SIZE: int = 4
DEFAULT_SEPARATOR: str = " "
ELECTRONIC_STRIP_PATTERN: re.Pattern[str] = re.compile(r"[- ]")
BBAN_STRIP_PATTERN: re.Pattern[str] = re.compile(r"[\s.]+")

# ---------------------------------------------------------------------------
# BIC
# ---------------------------------------------------------------------------

BIC_PATTERN: re.Pattern[str] = re.compile(r"[a-zA-Z]{6}[a-zA-Z0-9]{2}([a-zA-Z0-9]{3})?")


@final
@dataclass(frozen=True, slots=True)
class ValidationOptions:
    """Caller policy for IBAN validation.

    allow_qr_iban: accept QR-IBANs (CH/LI with a QR-IID in 30000-31999).
    """

    allow_qr_iban: bool = True


DEFAULT_OPTIONS: ValidationOptions = ValidationOptions()
