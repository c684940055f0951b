# mcpbridge - MCP server sync between OpenCode and Claude Code
# ABOUTME: Version information
__version__ = "0.1.0"

# ABOUTME: Export core data models and errors
from mcpbridge.config import ConfigPaths, get_config_paths
from mcpbridge.convert import claude_to_opencode, convert, opencode_to_claude
from mcpbridge.entries import add_entry, delete_entry, list_entries, update_entry
from mcpbridge.errors import (
    MCPBridgeError,
    NotFoundError,
    ParseError,
    PermissionDeniedError,
    UnknownSourceError,
    WriteError,
)
from mcpbridge.models import BACKENDS, Backend, BackupInfo, ConfigStore, MCPEntry, MCPList

# ABOUTME: Export store, sync and backup operations
from mcpbridge.stores import ClaudeStore, OpenCodeStore, get_store
from mcpbridge.sync import SyncPreview, SyncReport, preview_sync, sync_entry, sync_missing
from mcpbridge.utils import (
    backup_entries,
    get_backup_info,
    read_backup_raw,
    restore_all,
    restore_one,
)

__all__ = [
    "__version__",
    "BACKENDS",
    "Backend",
    "BackupInfo",
    "ConfigPaths",
    "ConfigStore",
    "MCPEntry",
    "MCPList",
    "SyncPreview",
    "SyncReport",
    "MCPBridgeError",
    "NotFoundError",
    "ParseError",
    "UnknownSourceError",
    "WriteError",
    "PermissionDeniedError",
    "OpenCodeStore",
    "ClaudeStore",
    "get_store",
    "get_config_paths",
    "opencode_to_claude",
    "claude_to_opencode",
    "convert",
    "list_entries",
    "add_entry",
    "update_entry",
    "delete_entry",
    "sync_entry",
    "preview_sync",
    "sync_missing",
    "backup_entries",
    "get_backup_info",
    "restore_all",
    "restore_one",
    "read_backup_raw",
]
