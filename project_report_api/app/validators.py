"""
Field checks shared by the request schemas and the path parameters.

The pydantic schemas in ``app.schemas`` call these from their field
validators, so a rejected value produces one human‑readable reason per
field.  A key whose value is ``null`` is treated the same as a missing
key.
"""

from typing import Any, List, Optional

BODY_NOT_OBJECT = "Request body must be a JSON object"
BODY_NOT_JSON = "Request body is not valid JSON"
BODY_REQUIRED = "Request body is required"
EMPTY_ID = "Id cannot be empty"


def _is_non_empty_string(value: Any) -> bool:
    return isinstance(value, str) and len(value.strip()) > 0


def id_errors(value: Any) -> List[str]:
    if not _is_non_empty_string(value):
        return [EMPTY_ID]
    return []


def required_text(value: Any, key: str) -> str:
    """Accept only a string with at least one non‑whitespace character."""
    if value is None:
        raise ValueError(f"Key '{key}' is required")
    if not _is_non_empty_string(value):
        raise ValueError(f"Key '{key}' must be a non-empty string")
    return value


def optional_text(value: Any, key: str) -> Optional[str]:
    if value is None:
        return None
    return required_text(value, key)


def optional_string(value: Any, key: str) -> Optional[str]:
    """Accept ``None`` or any string, including the empty one."""
    if value is not None and not isinstance(value, str):
        raise ValueError(f"Key '{key}' must be a string if provided")
    return value
