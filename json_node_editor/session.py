from __future__ import annotations

import logging
from typing import Callable, Optional

from .accessors import update_json_at_path
from .errors import ParseError
from .io_utils import parse_json_text
from .nodes import NodeView
from .paths import format_path
from .rows import normalize_rows
from .store import DocumentStore

logger = logging.getLogger(__name__)

Notifier = Callable[[str, str], None]

SAVE_OK_MESSAGE = "Node updated successfully!"
INVALID_JSON_MESSAGE = "Invalid JSON format. Please check your syntax."
SAVE_FAILED_MESSAGE = "Failed to update node. Please try again."


def _log_notifier(level: str, message: str) -> None:
    if level == 'error':
        logger.warning(message)
    else:
        logger.info(message)


class NodeEditSession:
    """Tracks the edit buffer of one selected node.

    The store stays the only owner of the document; the session only holds
    the node's text while the view is open and writes back through
    `update_json_at_path` on save.
    """

    def __init__(self, store: DocumentStore, node: NodeView, notify: Optional[Notifier] = None):
        self.store = store
        self.node = node
        self.notify = notify or _log_notifier
        self.is_editing = False
        self.edited_text = ''
        self.original_text = ''
        self.open()

    @property
    def path_label(self) -> str:
        return format_path(self.node.path)

    def open(self) -> None:
        text = normalize_rows(self.node.rows)
        self.edited_text = text
        self.original_text = text
        self.is_editing = False

    def start_edit(self) -> None:
        self.is_editing = True

    def set_text(self, text: str) -> None:
        self.edited_text = text

    def cancel(self) -> None:
        self.edited_text = self.original_text
        self.is_editing = False

    def close(self) -> None:
        self.cancel()

    def save(self) -> bool:
        try:
            value = parse_json_text(self.edited_text)
        except ParseError:
            self.notify('error', INVALID_JSON_MESSAGE)
            return False

        # Stored-document parse errors count as update failures.
        try:
            updated = update_json_at_path(self.store.get_contents(), self.node.path, value)
        except Exception:
            logger.exception("Save failed at %s", self.path_label)
            self.notify('error', SAVE_FAILED_MESSAGE)
            return False

        self.store.set_contents(updated)
        self.original_text = self.edited_text
        self.is_editing = False
        logger.debug("Saved node %s", self.path_label)
        self.notify('success', SAVE_OK_MESSAGE)
        return True
