from __future__ import annotations

import json
from typing import List, Optional, Sequence, Union

from .errors import PathSyntaxError

PathSegment = Union[int, str]
Path = Sequence[PathSegment]

ROOT_MARKER = '$'


def is_index(segment: PathSegment) -> bool:
    """True for array-index segments. bool is rejected even though it subclasses int."""
    return isinstance(segment, int) and not isinstance(segment, bool)


def format_segment(segment: PathSegment) -> str:
    if is_index(segment):
        return str(segment)
    if not isinstance(segment, str):
        segment = str(segment)
    return json.dumps(segment, ensure_ascii=False)


def format_path(path: Optional[Path]) -> str:
    """Render a path as a `$["key"][0]` locator. Empty or missing paths give '$'."""
    if not path:
        return ROOT_MARKER
    return ROOT_MARKER + ''.join(f"[{format_segment(seg)}]" for seg in path)


def parse_path(text: str) -> List[PathSegment]:
    """Parse a `$[...]` locator back into its segments.

    Quoted segments become keys, bare digits become indices.
    """
    if text is None:
        raise PathSyntaxError("No path supplied.")
    text = text.strip()
    if not text.startswith(ROOT_MARKER):
        raise PathSyntaxError(f"Path must start with '{ROOT_MARKER}': {text!r}")

    decoder = json.JSONDecoder()
    parts: List[PathSegment] = []
    i = len(ROOT_MARKER)
    while i < len(text):
        if text[i] != '[':
            raise PathSyntaxError(f"Expected '[' at offset {i} in {text!r}")
        i += 1
        if i < len(text) and text[i] == '"':
            try:
                key, i = decoder.raw_decode(text, i)
            except json.JSONDecodeError as e:
                raise PathSyntaxError(f"Unterminated key at offset {i} in {text!r}") from e
            parts.append(key)
        else:
            end = i
            while end < len(text) and text[end] in '0123456789':
                end += 1
            if end == i:
                raise PathSyntaxError(f"Expected a quoted key or an index at offset {i} in {text!r}")
            parts.append(int(text[i:end]))
            i = end
        if i >= len(text) or text[i] != ']':
            raise PathSyntaxError(f"Expected ']' at offset {i} in {text!r}")
        i += 1
    return parts
