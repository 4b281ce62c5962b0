"""Field decoding for serialized asset records."""

from __future__ import annotations

from collections.abc import Mapping

from assetstash.exceptions import UnserializeError


def require_str(record: Mapping[str, object], field: str) -> str:
    """Return a required string field or raise ``UnserializeError``."""
    value = record.get(field)
    if not isinstance(value, str) or not value:
        raise UnserializeError(f"Asset record field {field!r} must be a non-empty string, got {value!r}")
    return value


def optional_str(record: Mapping[str, object], field: str) -> str | None:
    """Return a string field, or None when absent."""
    value = record.get(field)
    if value is None:
        return None
    if not isinstance(value, str):
        raise UnserializeError(f"Asset record field {field!r} must be a string, got {type(value).__name__}")
    return value


def optional_int(record: Mapping[str, object], field: str) -> int | None:
    """Coerce an integer field, or None when absent.

    Numeric strings and floats are accepted the way ``int()`` accepts them.
    """
    value = record.get(field)
    if value is None:
        return None
    if isinstance(value, bool):
        raise UnserializeError(f"Asset record field {field!r} must be an integer, got bool")
    try:
        return int(value)  # type: ignore[call-overload]
    except (TypeError, ValueError, OverflowError) as exc:
        raise UnserializeError(f"Asset record field {field!r} is not an integer: {value!r}") from exc


def str_tuple(record: Mapping[str, object], field: str) -> tuple[str, ...]:
    """Return a list-of-strings field as a tuple; absent means empty."""
    value = record.get(field)
    if value is None:
        return ()
    if not isinstance(value, (list, tuple)) or not all(isinstance(item, str) for item in value):
        raise UnserializeError(f"Asset record field {field!r} must be a list of strings")
    return tuple(value)
