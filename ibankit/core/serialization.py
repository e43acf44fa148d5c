"""Canonical serialization and content hashing.

canonical_bytes(obj) -> Ok[bytes] | Err[str]: deterministic JSON bytes.
content_hash(obj) -> Ok[str] | Err[str]: SHA-256 hex of canonical bytes.

Used to export the country specification table. Callables are rejected,
which is why caller-registered BBAN validators live beside the table and not
inside its records.
"""

from __future__ import annotations

import dataclasses
import hashlib
import json
from enum import Enum
from typing import Any

from ibankit.core.result import Err, Ok
from ibankit.core.types import FrozenMap, IdentifierRange


def _to_serializable(obj: object) -> Any:  # noqa: PLR0911
    """Recursively convert a value to a JSON-compatible Python value."""
    if obj is None:
        return None
    # bool before int (bool is subclass of int)
    if isinstance(obj, bool):
        return obj
    if isinstance(obj, (int, str)):
        return obj
    if isinstance(obj, IdentifierRange):
        return f"{obj.start}-{obj.end}"
    if isinstance(obj, (tuple, list)):
        return [_to_serializable(x) for x in obj]
    if isinstance(obj, FrozenMap):
        return {str(k): _to_serializable(v) for k, v in obj.items()}
    if isinstance(obj, Enum):
        return obj.name
    if isinstance(obj, dict):
        return {str(k): _to_serializable(v) for k, v in sorted(obj.items())}
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return {
            f.name: _to_serializable(getattr(obj, f.name))
            for f in dataclasses.fields(obj)
            if f.init
        }
    msg = f"Cannot serialize {type(obj).__name__}"
    raise TypeError(msg)


def canonical_bytes(obj: object) -> Ok[bytes] | Err[str]:
    """Convert a value to canonical JSON bytes. Never raises."""
    try:
        serializable = _to_serializable(obj)
    except TypeError as e:
        return Err(f"Unsupported type in canonical serialization: {e}")
    return Ok(
        json.dumps(serializable, sort_keys=True, separators=(",", ":")).encode("utf-8")
    )


def content_hash(obj: object) -> Ok[str] | Err[str]:
    """SHA-256 hex digest of canonical_bytes(obj)."""
    return canonical_bytes(obj).map(lambda b: hashlib.sha256(b).hexdigest())
