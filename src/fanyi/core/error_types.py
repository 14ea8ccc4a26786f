from __future__ import annotations

from typing import Final

# Error envelopes carry a typed `error.type` so callers can branch without parsing messages.
KNOWN_ERROR_TYPES: Final[set[str]] = {
    "INVALID_ARGUMENT",
    "NOT_FOUND",
}


def assert_known_error_type(error_type: str) -> None:
    if error_type not in KNOWN_ERROR_TYPES:
        raise ValueError(f"Unknown error type: {error_type!r}. Add it to fanyi.core.error_types.KNOWN_ERROR_TYPES.")
