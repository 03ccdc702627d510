from __future__ import annotations

import logging
from typing import Any, Optional

from .errors import NodeEditorError, UpdateFailure
from .io_utils import dump_json_text, parse_json_text
from .paths import Path, PathSegment, format_path, is_index

logger = logging.getLogger(__name__)


def get_value_at_path(data: Any, path: Optional[Path]) -> Any:
    """Retrieve the value at `path`.

    Raises KeyError or IndexError when a segment is missing, and TypeError
    when a segment tries to descend through a scalar.
    """
    val = data
    for seg in path or ():
        if isinstance(val, dict):
            key = str(seg) if is_index(seg) else seg
            val = val[key]
        elif isinstance(val, list):
            if not is_index(seg) or seg < 0:
                raise KeyError(seg)
            val = val[seg]
        else:
            raise TypeError(f"Cannot descend into {type(val).__name__} at {seg!r}")
    return val


def _new_container(next_seg: PathSegment):
    return [] if is_index(next_seg) else {}


def _child(container, seg: PathSegment):
    if isinstance(container, dict):
        return container.get(str(seg) if is_index(seg) else seg)
    if 0 <= seg < len(container):
        return container[seg]
    return None


def _assign(container, seg: PathSegment, value: Any) -> None:
    if isinstance(container, dict):
        container[str(seg) if is_index(seg) else seg] = value
        return
    if seg < 0:
        raise IndexError(f"Negative array index {seg}")
    if seg >= len(container):
        # Assigning past the end pads the gap with nulls.
        container.extend([None] * (seg + 1 - len(container)))
    container[seg] = value


def set_value_at_path(data: Any, path: Optional[Path], value: Any) -> Any:
    """Set `value` at `path` inside `data`, creating missing containers.

    Missing intermediates become a list when the following segment is an
    index and a dict otherwise. A scalar standing where the path needs to
    descend is overwritten by the new container (structure wins over the
    old scalar, nothing is merged). Existing containers are never replaced:
    a key segment that meets a list, at any depth, raises TypeError, as does
    a scalar root with a non-empty path.
    """
    if not path:
        return value

    parts = list(path)
    if not (isinstance(data, dict) or (isinstance(data, list) and is_index(parts[0]))):
        raise TypeError(f"Document root of type {type(data).__name__} cannot hold {parts[0]!r}")

    current = data
    for i, seg in enumerate(parts[:-1]):
        nxt = parts[i + 1]
        child = _child(current, seg)
        if isinstance(child, dict) or (isinstance(child, list) and is_index(nxt)):
            current = child
            continue
        if isinstance(child, list):
            raise TypeError(f"Array at {format_path(parts[:i + 1])} cannot hold key {nxt!r}")
        child = _new_container(nxt)
        _assign(current, seg, child)
        current = child

    _assign(current, parts[-1], value)
    return data


def update_json_at_path(document_text: str, path: Optional[Path], new_value: Any) -> str:
    """Write `new_value` into the document at `path` and return the new document text.

    Raises ParseError when `document_text` is not valid JSON; nothing is
    mutated in that case. Any other failure is raised as UpdateFailure.
    """
    data = parse_json_text(document_text)

    try:
        updated = set_value_at_path(data, path, new_value)
        return dump_json_text(updated)
    except NodeEditorError:
        raise
    except Exception as e:
        logger.error("Failed to update JSON at path %s", format_path(path), exc_info=True)
        raise UpdateFailure("Failed to update JSON structure") from e
