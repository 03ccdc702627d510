from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from .io_utils import dump_json_text

STRUCTURAL_TYPES = ('array', 'object')


@dataclass(frozen=True)
class FieldRow:
    """One displayed field of a node.

    `key` is None for unkeyed rows (a scalar node, or a scalar array element).
    Rows typed 'array' or 'object' are placeholders for child nodes; their
    value is never written into the node's own text.
    """

    key: Optional[str]
    value: Any
    type: str


Row = Union[FieldRow, Mapping[str, Any]]


def _row_fields(row: Row):
    if isinstance(row, FieldRow):
        return row.key, row.value, row.type
    return row.get('key'), row.get('value'), row.get('type')


def row_type(value: Any) -> str:
    # bool before int/float: bool subclasses int.
    if isinstance(value, bool):
        return 'boolean'
    if value is None:
        return 'null'
    if isinstance(value, dict):
        return 'object'
    if isinstance(value, list):
        return 'array'
    if isinstance(value, (int, float)):
        return 'number'
    return 'string'


def scalar_text(value: Any) -> str:
    """Plain text for a single scalar node: strings verbatim, JSON literals otherwise."""
    if isinstance(value, str):
        return value
    if isinstance(value, float) and value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return json.dumps(value, ensure_ascii=False)


def normalize_rows(rows: Optional[Sequence[Row]]) -> str:
    """Collapse a node's rows into the text that seeds its edit buffer."""
    if not rows:
        return '{}'

    if len(rows) == 1:
        key, value, _ = _row_fields(rows[0])
        if not key:
            return scalar_text(value)

    obj: Dict[str, Any] = {}
    for row in rows:
        key, value, kind = _row_fields(row)
        if kind in STRUCTURAL_TYPES:
            continue
        if key:
            obj[key] = value
    return dump_json_text(obj)


def rows_from_value(value: Any) -> List[FieldRow]:
    """Build the rows the graph view shows for a node holding `value`."""
    if isinstance(value, dict):
        return [
            FieldRow(key=k, value=None if isinstance(v, (dict, list)) else v, type=row_type(v))
            for k, v in value.items()
        ]
    if isinstance(value, list):
        return [
            FieldRow(key=None, value=None if isinstance(v, (dict, list)) else v, type=row_type(v))
            for v in value
        ]
    return [FieldRow(key=None, value=value, type=row_type(value))]
