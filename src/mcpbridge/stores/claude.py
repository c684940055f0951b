# Claude Code config store
from pathlib import Path

from mcpbridge.config import get_claude_config_path
from mcpbridge.models import Backend, ConfigStore
from mcpbridge.stores.base import JsonConfigStore


class ClaudeStore(JsonConfigStore, ConfigStore):
    """Store for Claude Code (~/.claude.json).

    ABOUTME: MCP servers live under the 'mcpServers' key
    ABOUTME: Everything else in ~/.claude.json is written back unchanged
    """

    backend: Backend = "claude"
    name = "Claude Code"
    servers_key = "mcpServers"

    def __init__(self, config_path: Path | None = None) -> None:
        """Initialize store with optional custom config path.

        ABOUTME: Defaults to ~/.claude.json if not provided
        """
        super().__init__(config_path if config_path else get_claude_config_path())
