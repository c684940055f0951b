# OpenCode config store
from pathlib import Path

from mcpbridge.config import get_opencode_config_path
from mcpbridge.models import Backend, ConfigStore
from mcpbridge.stores.base import JsonConfigStore


class OpenCodeStore(JsonConfigStore, ConfigStore):
    """Store for OpenCode (opencode/opencode.json).

    ABOUTME: MCP servers live under the 'mcp' key
    ABOUTME: Keeps $schema, provider, plugin and any other settings untouched
    """

    backend: Backend = "opencode"
    name = "OpenCode"
    servers_key = "mcp"

    def __init__(self, config_path: Path | None = None) -> None:
        """Initialize store with optional custom config path.

        ABOUTME: Defaults to the per-OS OpenCode location if not provided
        """
        super().__init__(config_path if config_path else get_opencode_config_path())
