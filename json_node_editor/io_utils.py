from __future__ import annotations

import json
from typing import Any

from .config import DEFAULT_CONFIG
from .errors import ParseError


def _reject_constant(name: str):
    raise ParseError(f"Invalid JSON: {name} is not a JSON value")


def parse_json_text(text: str) -> Any:
    """Parse JSON text, raising ParseError with the decoder position on failure.

    NaN and Infinity are rejected: they are not JSON.
    """
    if text is None:
        raise ParseError("No JSON text supplied.")
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except json.JSONDecodeError as e:
        raise ParseError.from_decode_error(e) from e


def dump_json_text(value: Any, indent: int = DEFAULT_CONFIG.indent) -> str:
    """Serialize a value as indented JSON text. Raises ValueError for NaN or Infinity."""
    return json.dumps(value, indent=indent, ensure_ascii=DEFAULT_CONFIG.ensure_ascii, allow_nan=False)


def read_json_text(file_obj) -> str:
    """Read JSON text from an uploaded file or file path and validate it."""
    if file_obj is None:
        raise ValueError("No file uploaded.")

    if hasattr(file_obj, 'read'):
        if hasattr(file_obj, 'seek'):
            file_obj.seek(0)
        content = file_obj.read()
    else:
        path = file_obj.name if hasattr(file_obj, 'name') else file_obj
        with open(path, 'r', encoding='utf-8') as f:
            content = f.read()

    if isinstance(content, bytes):
        content = content.decode('utf-8')
    parse_json_text(content)
    return content
