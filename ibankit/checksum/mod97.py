"""ISO 7064 MOD 97-10 over arbitrarily long digit strings.

remap_letters: A=10 ... Z=35, everything else unchanged.
mod97: chunked reduction, Err instead of a NaN sentinel on non-digits.
verify_check_digits / generate_check_digits: the IBAN check value.

Verification regenerates the check digits from the BBAN and compares them to
the two provided digits. "Remainder of the rearranged IBAN == 1" is never
used as the test.
"""

from __future__ import annotations

import logging
import re

from ibankit.core.config import CHECK_DIGITS_PATTERN, MOD97_CHUNK_SIZE
from ibankit.core.result import Err, Ok

logger = logging.getLogger(__name__)

_DIGITS = re.compile(r"[0-9]+")


def remap_letters(text: str) -> str:
    """Replace each ASCII letter by its two-digit code (A/a=10 ... Z/z=35)."""
    out: list[str] = []
    for c in text:
        if c.isascii() and c.isalpha():
            out.append(str(ord(c.upper()) - 55))
        else:
            out.append(c)
    return "".join(out)


def mod97(digits: str) -> Ok[int] | Err[str]:
    """Compute int(digits) % 97 by reducing MOD97_CHUNK_SIZE digits at a time.

    Returns Err if any chunk is not made of ASCII decimal digits (including
    an empty input). Callers treat Err as a failed check.
    """
    rest = digits
    while len(rest) > 2:
        chunk = rest[:MOD97_CHUNK_SIZE]
        if not _DIGITS.fullmatch(chunk):
            logger.debug("mod97 rejected non-numeric chunk %r", chunk)
            return Err(f"Non-numeric chunk '{chunk}' in mod-97 input")
        rest = str(int(chunk) % 97) + rest[len(chunk):]
    if not _DIGITS.fullmatch(rest):
        logger.debug("mod97 rejected non-numeric tail %r", rest)
        return Err(f"Non-numeric tail '{rest}' in mod-97 input")
    return Ok(int(rest) % 97)


def generate_check_digits(country_code: str, bban: str) -> Ok[str] | Err[str]:
    """Two-digit IBAN check value for country_code + bban, zero-padded."""
    return mod97(remap_letters(f"{bban}{country_code}00")).map(lambda r: f"{98 - r:02d}")


def verify_check_digits(iban: str) -> bool:
    """True iff iban[2:4] equals the check digits generated from the rest."""
    provided = iban[2:4]
    if not CHECK_DIGITS_PATTERN.fullmatch(provided):
        return False
    return generate_check_digits(iban[:2], iban[4:]).unwrap_or(None) == provided
