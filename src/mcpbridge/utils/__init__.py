# ABOUTME: Utility modules for mcpbridge
# ABOUTME: Exports payload parsing, display and snapshot backup functions

from mcpbridge.utils.backup import (
    backup_entries,
    get_backup_info,
    get_backup_path,
    read_backup_raw,
    restore_all,
    restore_one,
)
from mcpbridge.utils.validation import describe, display_type, parse_definition

__all__ = [
    "parse_definition",
    "display_type",
    "describe",
    "backup_entries",
    "get_backup_info",
    "get_backup_path",
    "restore_all",
    "restore_one",
    "read_backup_raw",
]
