from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Tuple

from .accessors import get_value_at_path
from .io_utils import parse_json_text
from .paths import Path, PathSegment, format_path
from .rows import FieldRow, rows_from_value


@dataclass(frozen=True)
class NodeView:
    """A view of one location of the document: its path and displayed rows."""

    path: Tuple[PathSegment, ...] = ()
    rows: Tuple[FieldRow, ...] = field(default_factory=tuple)

    @property
    def label(self) -> str:
        return format_path(self.path)


def list_node_paths(data: Any, parent: Tuple[PathSegment, ...] = ()) -> List[Tuple[PathSegment, ...]]:
    """Every location in the document, root first, in document order."""
    paths: List[Tuple[PathSegment, ...]] = [parent]
    if isinstance(data, dict):
        for k, v in data.items():
            paths.extend(list_node_paths(v, parent + (k,)))
    elif isinstance(data, list):
        for idx, item in enumerate(data):
            paths.extend(list_node_paths(item, parent + (idx,)))
    return paths


def select_node(document_text: str, path: Path) -> NodeView:
    """Build the view of the node at `path`.

    Raises ParseError for invalid document text and KeyError/IndexError when
    nothing exists at `path`.
    """
    data = parse_json_text(document_text)
    value = get_value_at_path(data, path)
    return NodeView(path=tuple(path or ()), rows=tuple(rows_from_value(value)))
