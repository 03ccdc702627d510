from __future__ import annotations

from typing import List, Tuple

import gradio as gr

from .errors import NodeEditorError
from .io_utils import parse_json_text
from .nodes import NodeView, list_node_paths, select_node
from .paths import ROOT_MARKER, format_path, parse_path
from .session import NodeEditSession
from .store import DocumentStore


def node_path_choices(contents: str) -> List[str]:
    try:
        data = parse_json_text(contents)
    except NodeEditorError:
        return [ROOT_MARKER]
    return [format_path(p) for p in list_node_paths(data)]


def _mode_updates(is_editing: bool):
    """Edit, Save and Cancel button updates for view or edit mode."""
    return (
        gr.update(visible=not is_editing),
        gr.update(visible=is_editing),
        gr.update(visible=is_editing),
    )


def load_document_handler(file_obj):
    if file_obj is None:
        return gr.update(), gr.update(), "No file uploaded."

    try:
        contents = DocumentStore().load(file_obj)
    except Exception as e:
        return gr.update(), gr.update(), f"Error parsing JSON: {str(e)}"

    choices = node_path_choices(contents)
    return contents, gr.update(choices=choices, value=ROOT_MARKER), f"Successfully loaded. Found {len(choices)} nodes."


def refresh_node_choices(contents: str, current_label: str):
    choices = node_path_choices(contents)
    value = current_label if current_label in choices else ROOT_MARKER
    return gr.update(choices=choices, value=value)


def open_node_handler(contents: str, node_label: str):
    """Seed the edit buffer and path label for the selected node.

    Returns (code, original_text, path_label, editing, edit_btn, save_btn, cancel_btn, status).
    """
    try:
        node = select_node(contents, parse_path(node_label or ROOT_MARKER))
    except (NodeEditorError, KeyError, IndexError, TypeError) as e:
        return (gr.update(value="", interactive=False), "", node_label or ROOT_MARKER, False,
                *_mode_updates(False), f"Cannot open node: {str(e)}")

    session = NodeEditSession(DocumentStore(contents), node)
    return (gr.update(value=session.edited_text, interactive=False), session.original_text,
            session.path_label, False, *_mode_updates(False), "")


def start_edit_handler():
    return (gr.update(interactive=True), True, *_mode_updates(True))


def cancel_edit_handler(original_text: str):
    return (gr.update(value=original_text, interactive=False), False, *_mode_updates(False))


def save_node_handler(contents: str, node_label: str, edited_text: str, original_text: str):
    """Write the edited node back into the document.

    Returns (contents, code, original_text, editing, edit_btn, save_btn, cancel_btn, status).
    On failure the document and the edit buffer are returned unchanged and
    edit mode stays on.
    """
    messages: List[Tuple[str, str]] = []
    try:
        path = parse_path(node_label or ROOT_MARKER)
    except NodeEditorError as e:
        return (contents, gr.update(), original_text, True, *_mode_updates(True), f"Invalid node path: {str(e)}")

    store = DocumentStore(contents)
    session = NodeEditSession(store, NodeView(path=tuple(path)),
                              notify=lambda level, message: messages.append((level, message)))
    session.original_text = original_text
    session.start_edit()
    session.set_text(edited_text)

    ok = session.save()
    status = messages[-1][1] if messages else ""
    if not ok:
        return (contents, gr.update(), original_text, True, *_mode_updates(True), status)
    return (store.get_contents(), gr.update(value=session.edited_text, interactive=False),
            session.original_text, False, *_mode_updates(False), status)
