from __future__ import annotations

import logging

from .io_utils import read_json_text

logger = logging.getLogger(__name__)


class DocumentStore:
    """Holds the authoritative document text.

    There is a single writer (the editor session or app handler); readers
    always get the latest full text and nothing is locked. Contents are
    validated when loaded from a file; text set directly is trusted and
    checked on the next update.
    """

    def __init__(self, contents: str = '{}'):
        self._contents = contents

    def get_contents(self) -> str:
        return self._contents

    def set_contents(self, contents: str) -> None:
        self._contents = contents

    def load(self, file_obj) -> str:
        """Replace the contents with an uploaded file's JSON text."""
        self._contents = read_json_text(file_obj)
        logger.info("Loaded document (%d characters)", len(self._contents))
        return self._contents
