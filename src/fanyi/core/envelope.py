from __future__ import annotations

import json
from typing import Any, Dict

from fanyi.core.error_types import assert_known_error_type

SCHEMA_VERSION = "1"


def ok(
    *,
    command: str,
    data: Dict[str, Any] | None = None,
    truncated: bool = False,
    limits: Dict[str, Any] | None = None,
) -> Dict[str, Any]:
    return {
        "ok": True,
        "schema_version": SCHEMA_VERSION,
        "command": command,
        "data": data or {},
        "truncated": truncated,
        "limits": limits or {},
    }


def err(
    *,
    command: str,
    error_type: str,
    message: str,
    details: Dict[str, Any] | None = None,
) -> Dict[str, Any]:
    assert_known_error_type(error_type)
    return {
        "ok": False,
        "schema_version": SCHEMA_VERSION,
        "command": command,
        "error": {
            "type": error_type,
            "message": message,
            "details": details or {},
        },
    }


def dumps(obj: Dict[str, Any]) -> str:
    return json.dumps(obj, ensure_ascii=False, indent=2, sort_keys=True) + "\n"
