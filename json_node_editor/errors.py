from __future__ import annotations

import json
from typing import Optional


class NodeEditorError(Exception):
    """Base class for expected node editor failures."""


class ParseError(NodeEditorError, ValueError):
    """Raised when document text or an edited value is not valid JSON."""

    def __init__(self, message: str, line: Optional[int] = None, column: Optional[int] = None):
        super().__init__(message)
        self.line = line
        self.column = column

    @classmethod
    def from_decode_error(cls, err: json.JSONDecodeError) -> 'ParseError':
        return cls(f"Invalid JSON: {err.msg} (line {err.lineno}, column {err.colno})", err.lineno, err.colno)


class UpdateFailure(NodeEditorError, RuntimeError):
    """Raised for any non-syntax failure while applying an update."""


class PathSyntaxError(NodeEditorError, ValueError):
    """Raised when a `$[...]` locator cannot be parsed back into a path."""
