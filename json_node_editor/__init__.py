"""Core logic for the JSON Node Editor.

The Gradio UI lives in `app.py`. This package contains pure functions that:
- collapse a node's field rows into editable JSON text
- render node paths as `$["key"][0]` locators
- write an edited node value back into the full document
"""
