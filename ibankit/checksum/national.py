"""National BBAN check-digit algorithms.

Each check_* function takes a BBAN (country code and IBAN check digits
already removed) and returns a bool. They are run even when the BBAN failed
its structural pattern, so every function returns False, and never raises,
on input that is too short or has letters where digits are required.

Countries reference an algorithm by BbanAlgorithm member; ALGORITHMS maps
members to functions. This keeps the country table free of callables.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from enum import Enum

from ibankit.checksum.mod97 import mod97
from ibankit.core.config import BBAN_STRIP_PATTERN
from ibankit.core.result import Ok

type BbanValidator = Callable[[str], bool]


class BbanAlgorithm(Enum):
    """Check-digit schemes referenced by the country table."""

    MOD97 = "MOD97"
    NORWAY = "NORWAY"
    BELGIUM = "BELGIUM"
    POLAND = "POLAND"
    SPAIN = "SPAIN"
    CROATIA = "CROATIA"
    CZECH_SLOVAK = "CZECH_SLOVAK"
    ESTONIA = "ESTONIA"
    FRANCE = "FRANCE"
    HUNGARY = "HUNGARY"


# ---------------------------------------------------------------------------
# Shared arithmetic
# ---------------------------------------------------------------------------


def _digits(text: str) -> list[int] | None:
    """Digit values of text, or None unless text is non-empty ASCII digits."""
    if not text or not (text.isascii() and text.isdigit()):
        return None
    return [int(c) for c in text]


def _control(bban: str, index: int) -> int | None:
    if index >= len(bban):
        return None
    digits = _digits(bban[index])
    return None if digits is None else digits[0]


def _weighted_sum(digits: Sequence[int], weights: Sequence[int]) -> int:
    return sum(d * w for d, w in zip(digits, weights, strict=False))


def _mod10_complement(total: int) -> int:
    remainder = total % 10
    return 0 if remainder == 0 else 10 - remainder


def _mod11_complement(total: int) -> int:
    """0 -> 0, 1 -> 1, otherwise 11 - remainder."""
    remainder = total % 11
    return remainder if remainder in (0, 1) else 11 - remainder


def _weighted_check(
    bban: str, start: int, end: int, control_at: int,
    weights: Sequence[int], complement: Callable[[int], int],
) -> bool:
    window = bban[start:end]
    digits = _digits(window)
    control = _control(bban, control_at)
    if digits is None or control is None or len(window) != end - start:
        return False
    return control == complement(_weighted_sum(digits, weights))


def _strip(bban: str) -> str:
    return BBAN_STRIP_PATTERN.sub("", bban)


# ---------------------------------------------------------------------------
# Algorithms
# ---------------------------------------------------------------------------


def check_mod97(bban: str) -> bool:
    """Whole BBAN mod 97 == 1 (BA, ME, MK, PT, RS, SI)."""
    return mod97(_strip(bban)) == Ok(1)


def check_norway(bban: str) -> bool:
    """NO: weights 5432765432 over ten digits, control at index 10."""
    stripped = _strip(bban)
    digits = _digits(stripped[:10])
    control = _control(stripped, 10)
    if digits is None or control is None or len(digits) != 10:
        return False
    remainder = _weighted_sum(digits, (5, 4, 3, 2, 7, 6, 5, 4, 3, 2)) % 11
    return control == (0 if remainder == 0 else 11 - remainder)


def check_belgium(bban: str) -> bool:
    """BE: leading digits mod 97 equal the last two; a zero remainder reads as 97."""
    stripped = _strip(bban)
    if len(stripped) < 3 or _digits(stripped) is None:
        return False
    remainder = int(stripped[:-2]) % 97 or 97
    return remainder == int(stripped[-2:])


def check_poland(bban: str) -> bool:
    """PL: weights 3971397 over the bank/branch code, control at index 7."""
    return _weighted_check(bban, 0, 7, 7, (3, 9, 7, 1, 3, 9, 7), _mod10_complement)


def check_spain(bban: str) -> bool:
    """ES: entity+office (control at 8) and account (control at 9), mod 11."""
    return _weighted_check(
        bban, 0, 8, 8, (4, 8, 5, 10, 9, 7, 3, 6), _mod11_complement,
    ) and _weighted_check(
        bban, 10, 20, 9, (1, 2, 4, 8, 5, 10, 9, 7, 3, 6), _mod11_complement,
    )


def _mod11_10(digits: Sequence[int], control: int) -> bool:
    """ISO 7064 MOD 11,10 check."""
    acc = 10
    for d in digits:
        acc += d
        if acc % 10 != 0:
            acc %= 10
        acc = (acc * 2) % 11
    return control == (0 if 11 - acc == 10 else 11 - acc)


def check_croatia(bban: str) -> bool:
    """HR: MOD 11,10 on the bank code (control 6) and account (control 16)."""
    bank = _digits(bban[0:6])
    account = _digits(bban[7:16])
    bank_control = _control(bban, 6)
    account_control = _control(bban, 16)
    if bank is None or account is None or bank_control is None or account_control is None:
        return False
    if len(bank) != 6 or len(account) != 9:
        return False
    return _mod11_10(bank, bank_control) and _mod11_10(account, account_control)


def check_czech_slovak(bban: str) -> bool:
    """CZ/SK: account prefix (control 9) and account number (control 19), mod 11."""
    return _weighted_check(
        bban, 4, 9, 9, (10, 5, 8, 4, 2, 1), _mod11_complement,
    ) and _weighted_check(
        bban, 10, 19, 19, (6, 3, 7, 9, 10, 5, 8, 4, 2, 1), _mod11_complement,
    )


def check_estonia(bban: str) -> bool:
    """EE: weights 713 over bban[2:15], control at index 15."""
    return _weighted_check(bban, 2, 15, 15, (7, 1, 3) * 5, _mod10_complement)


_FRENCH_LETTERS = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ",
    "12345678912345678923456789",
)


def check_france(bban: str) -> bool:
    """FR/MC: letters fold to 1-9 (A/J=1 ... I/R/Z=9), then mod 97 == 0."""
    return mod97(_strip(bban).translate(_FRENCH_LETTERS)) == Ok(0)


def check_hungary(bban: str) -> bool:
    """HU: bank/branch (control 7) then account, short or long form, mod 10."""
    weights = (9, 7, 3, 1) * 4
    if not _weighted_check(bban, 0, 7, 7, weights, _mod10_complement):
        return False
    if bban.endswith("00000000"):
        return _weighted_check(bban, 8, 15, 15, weights, _mod10_complement)
    return _weighted_check(bban, 8, 23, 23, weights, _mod10_complement)


ALGORITHMS: dict[BbanAlgorithm, BbanValidator] = {
    BbanAlgorithm.MOD97: check_mod97,
    BbanAlgorithm.NORWAY: check_norway,
    BbanAlgorithm.BELGIUM: check_belgium,
    BbanAlgorithm.POLAND: check_poland,
    BbanAlgorithm.SPAIN: check_spain,
    BbanAlgorithm.CROATIA: check_croatia,
    BbanAlgorithm.CZECH_SLOVAK: check_czech_slovak,
    BbanAlgorithm.ESTONIA: check_estonia,
    BbanAlgorithm.FRANCE: check_france,
    BbanAlgorithm.HUNGARY: check_hungary,
}


def run_algorithm(algorithm: BbanAlgorithm, bban: str) -> bool:
    return ALGORITHMS[algorithm](bban)
