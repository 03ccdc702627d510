from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

ENV_PREFIX = 'JSON_NODE_EDITOR_'


@dataclass(frozen=True)
class EditorConfig:
    """Immutable editor settings.

    Attributes:
        indent: Indentation used for every serialized document and node.
        ensure_ascii: Escape non-ASCII characters when serializing.
        log_level: Name of the logging level configured by the app.
        server_name: Interface the Gradio app binds to.
        server_port: Port the Gradio app listens on.

    `indent` and `ensure_ascii` are fixed serialization settings;
    `from_env` only reads the app settings.
    """

    indent: int = 2
    ensure_ascii: bool = False
    log_level: str = 'INFO'
    server_name: str = '127.0.0.1'
    server_port: int = 7860

    def __post_init__(self) -> None:
        if self.indent < 0:
            raise ValueError(f"indent must be >= 0, got {self.indent}")
        if not 0 < self.server_port < 65536:
            raise ValueError(f"server_port must be in 1..65535, got {self.server_port}")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'EditorConfig':
        env = os.environ if environ is None else environ

        def _get(name: str, default):
            return env.get(ENV_PREFIX + name, default)

        return cls(
            log_level=str(_get('LOG_LEVEL', cls.log_level)).upper(),
            server_name=str(_get('SERVER_NAME', cls.server_name)),
            server_port=int(_get('SERVER_PORT', cls.server_port)),
        )


DEFAULT_CONFIG = EditorConfig()
