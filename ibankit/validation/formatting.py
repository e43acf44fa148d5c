"""Electronic (compact) and friendly (grouped) IBAN formats.

Neither function validates its input.
"""

from __future__ import annotations

from ibankit.core.config import DEFAULT_SEPARATOR, ELECTRONIC_STRIP_PATTERN, FRIENDLY_GROUP_SIZE


def electronic_format(value: object) -> str | None:
    """Strip spaces and dashes and uppercase. None for non-str input.

    "NL91 ABNA 0417 1643 00" -> "NL91ABNA0417164300"
    """
    if not isinstance(value, str):
        return None
    return ELECTRONIC_STRIP_PATTERN.sub("", value).upper()


def friendly_format(value: object, separator: str | None = None) -> str | None:
    """Electronic form split into groups of four. None for non-str input.

    "NL91ABNA0417164300" -> "NL91 ABNA 0417 1643 00"
    """
    electronic = electronic_format(value)
    if electronic is None:
        return None
    sep = DEFAULT_SEPARATOR if separator is None else separator
    return sep.join(
        electronic[i : i + FRIENDLY_GROUP_SIZE]
        for i in range(0, len(electronic), FRIENDLY_GROUP_SIZE)
    )
