"""
Field access helpers for decoding API payloads into domain objects.

Each helper raises ``MalformedResponseError`` naming the missing or
mistyped field, so a changed API surfaces as a reported error rather
than a crash deep inside a command.
"""

from typing import Any

from ..core.exceptions import MalformedResponseError


def require_object(payload: Any, context: str) -> dict[str, Any]:
    """Ensure ``payload`` is a JSON object."""
    if not isinstance(payload, dict):
        raise MalformedResponseError(f"{context}: expected an object, got {type(payload).__name__}")
    return payload


def require_list(payload: dict[str, Any], key: str, context: str) -> list[Any]:
    """Return ``payload[key]`` as a list."""
    value = payload.get(key)
    if not isinstance(value, list):
        raise MalformedResponseError(f"{context}: field '{key}' must be a list")
    return value


def require_number(payload: dict[str, Any], key: str, context: str) -> float:
    """Return ``payload[key]`` as a float; numeric strings are accepted."""
    value = payload.get(key)
    if isinstance(value, bool):
        raise MalformedResponseError(f"{context}: field '{key}' must be a number")
    if isinstance(value, int | float):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            pass
    raise MalformedResponseError(f"{context}: field '{key}' must be a number, got {value!r}")


def optional_number(payload: dict[str, Any], key: str, context: str) -> float | None:
    """Like ``require_number`` but ``None`` when the field is absent or null."""
    if payload.get(key) is None:
        return None
    return require_number(payload, key, context)


def require_str(payload: dict[str, Any], key: str, context: str) -> str:
    """Return ``payload[key]`` as a string."""
    value = payload.get(key)
    if not isinstance(value, str):
        raise MalformedResponseError(f"{context}: field '{key}' must be a string")
    return value


def optional_str(payload: dict[str, Any], key: str, default: str = "") -> str:
    """Return ``payload[key]`` as a string, or ``default`` when absent or null."""
    value = payload.get(key)
    if value is None:
        return default
    return str(value)


def require_bool(payload: dict[str, Any], key: str, context: str) -> bool:
    """Return ``payload[key]`` as a bool."""
    value = payload.get(key)
    if not isinstance(value, bool):
        raise MalformedResponseError(f"{context}: field '{key}' must be a boolean")
    return value
