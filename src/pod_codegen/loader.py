from __future__ import annotations

import json
import math
from pathlib import Path
from typing import Any, Dict, List

from pod_codegen.models import (
    DefaultValue,
    Docstring,
    MemberVariable,
    ModelError,
    RecordDefinition,
)


def load_record(file_path: str) -> RecordDefinition:
    """Load a struct description from a JSON file.

    Expected shape:
        {
            "name": "OrderInfo",
            "docs": "One line about the struct.",
            "members": [
                {"dtype": "uint32_t", "name": "orderId", "default": "0"},
                {"dtype": "bool", "name": "isActive", "docs": "Open order."}
            ]
        }
    """
    try:
        text = Path(file_path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ModelError(f"Cannot read {file_path}: {e}") from e
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ModelError(f"Invalid JSON in {file_path}: {e}") from e
    return record_from_dict(data)


def record_from_dict(data: Dict[str, Any]) -> RecordDefinition:
    """Build a RecordDefinition from already-decoded data."""
    if not isinstance(data, dict):
        raise ModelError(f"Struct description must be an object, got {type(data).__name__}")

    name = _require_str(data, "name", "struct")
    raw_members = data.get("members", [])
    if not isinstance(raw_members, list):
        raise ModelError(f"'members' of struct '{name}' must be a list")

    members: List[MemberVariable] = []
    for index, raw in enumerate(raw_members):
        members.append(_member_from_dict(raw, f"member #{index} of struct '{name}'"))

    return RecordDefinition(
        name=name,
        members=tuple(members),
        docs=_docstring(data.get("docs"), f"struct '{name}'"),
    )


def _member_from_dict(data: Any, where: str) -> MemberVariable:
    if not isinstance(data, dict):
        raise ModelError(f"{where} must be an object")
    return MemberVariable(
        dtype=_require_str(data, "dtype", where),
        name=_require_str(data, "name", where),
        docs=_docstring(data.get("docs"), where),
        default=_default_value(data.get("default"), where),
    )


def _require_str(data: Dict[str, Any], key: str, where: str) -> str:
    value = data.get(key)
    if not isinstance(value, str) or not value:
        raise ModelError(f"Missing or empty '{key}' in {where}")
    return value


def _docstring(value: Any, where: str) -> Docstring:
    if value is None:
        return Docstring.absent()
    if not isinstance(value, str):
        raise ModelError(f"'docs' in {where} must be a string")
    return Docstring.one_line(value)


def _default_value(value: Any, where: str) -> DefaultValue:
    """Map a JSON default onto an initializer expression.

    Strings are taken verbatim; numbers go through str(); booleans become
    the C-family literals true/false. NaN and Infinity have no C-family
    literal and are rejected.
    """
    if value is None:
        return DefaultValue.absent()
    if isinstance(value, bool):
        return DefaultValue.present("true" if value else "false")
    if isinstance(value, float) and not math.isfinite(value):
        raise ModelError(f"'default' in {where} must be a finite number, got {value}")
    if isinstance(value, (int, float, str)):
        return DefaultValue.present(str(value))
    raise ModelError(f"'default' in {where} must be a string, number or boolean")
