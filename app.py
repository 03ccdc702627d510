import logging

import gradio as gr

from json_node_editor.config import EditorConfig
from json_node_editor.handlers import (
    cancel_edit_handler,
    load_document_handler,
    open_node_handler,
    refresh_node_choices,
    save_node_handler,
    start_edit_handler,
)
from json_node_editor.paths import ROOT_MARKER

config = EditorConfig.from_env()
logging.basicConfig(level=config.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

# --- UI Definition ---
with gr.Blocks(title="JSON Node Editor") as demo:
    gr.Markdown("# JSON Node Editor")
    gr.Markdown("Load a JSON document, pick a node, edit it and write it back into the document.")

    # State
    original_text_state = gr.State(value="")
    editing_state = gr.State(value=False)

    with gr.Row():
        # Left Panel: Document
        with gr.Column(scale=1):
            gr.Markdown("### 1. Document")
            file_input = gr.File(label="Upload JSON File", file_types=[".json"])
            document_text = gr.Code(label="Document", language="json", value="{}", interactive=True)
            status_msg = gr.Textbox(label="Status", interactive=False)

        # Right Panel: Node view
        with gr.Column(scale=1):
            gr.Markdown("### 2. Node")
            node_selector = gr.Dropdown(
                label="Node",
                choices=[ROOT_MARKER],
                value=ROOT_MARKER,
                allow_custom_value=True,
                interactive=True,
            )
            node_content = gr.Code(label="Content", language="json", interactive=False)
            path_label = gr.Code(label="JSON Path", language="json", interactive=False)

            with gr.Row():
                edit_btn = gr.Button("Edit", variant="primary")
                cancel_btn = gr.Button("Cancel", visible=False)
                save_btn = gr.Button("Save", variant="primary", visible=False)

    mode_outputs = [edit_btn, save_btn, cancel_btn]

    file_input.upload(
        fn=load_document_handler,
        inputs=[file_input],
        outputs=[document_text, node_selector, status_msg],
    )

    document_text.change(
        fn=refresh_node_choices,
        inputs=[document_text, node_selector],
        outputs=[node_selector],
    )

    node_selector.change(
        fn=open_node_handler,
        inputs=[document_text, node_selector],
        outputs=[node_content, original_text_state, path_label, editing_state, *mode_outputs, status_msg],
    )

    edit_btn.click(
        fn=start_edit_handler,
        inputs=[],
        outputs=[node_content, editing_state, *mode_outputs],
    )

    cancel_btn.click(
        fn=cancel_edit_handler,
        inputs=[original_text_state],
        outputs=[node_content, editing_state, *mode_outputs],
    )

    demo.load(
        fn=open_node_handler,
        inputs=[document_text, node_selector],
        outputs=[node_content, original_text_state, path_label, editing_state, *mode_outputs, status_msg],
    )

    save_btn.click(
        fn=save_node_handler,
        inputs=[document_text, node_selector, node_content, original_text_state],
        outputs=[document_text, node_content, original_text_state, editing_state, *mode_outputs, status_msg],
    )

if __name__ == "__main__":
    demo.launch(server_name=config.server_name, server_port=config.server_port)
