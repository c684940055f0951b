# ABOUTME: Snapshot backup and restore of MCP entries, one file per backend.
# ABOUTME: Each backup overwrites {backend}_mcps.json, no history is kept.
import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any

from mcpbridge.config import ConfigPaths, resolve_paths
from mcpbridge.errors import (
    NotFoundError,
    ParseError,
    PermissionDeniedError,
    UnknownSourceError,
)
from mcpbridge.models import BACKENDS, Backend, BackupInfo, Definition
from mcpbridge.stores import get_store, validate_backend
from mcpbridge.stores.base import path_exists, write_json_file

logger = logging.getLogger(__name__)

# ABOUTME: Display format for created_at, file-safe format for timestamp
CREATED_AT_FORMAT = "%Y-%m-%d %H:%M:%S"
TIMESTAMP_FORMAT = "%Y%m%d_%H%M%S"


def get_backup_filename(backend: str) -> str:
    """Return the fixed snapshot filename for a backend.

    Examples:
        >>> get_backup_filename("claude")
        'claude_mcps.json'
    """
    return f"{backend}_mcps.json"


def get_backup_path(backend: str, paths: ConfigPaths | None = None) -> Path:
    """Return the snapshot path for a backend.

    ABOUTME: Does not create anything

    Raises:
        ValueError: If backend is unknown
    """
    validate_backend(backend)
    return resolve_paths(paths).backup_dir / get_backup_filename(backend)


def _read_snapshot_text(backend: str, path: Path) -> str:
    if not path_exists(path):
        raise NotFoundError(f"Backup file not found for {backend}")
    try:
        return path.read_text(encoding="utf-8")
    except PermissionError as e:
        raise PermissionDeniedError(f"Cannot read backup {path}: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise ParseError(f"Failed to read backup {path}: {e}") from e


def _parse_snapshot(path: Path, content: str) -> dict[str, Any]:
    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ParseError(f"Failed to parse backup {path}: {e}") from e
    if not isinstance(data, dict):
        raise ParseError(f"Failed to parse backup {path}: top-level value must be a JSON object")
    return data


def _load_snapshot(backend: str, paths: ConfigPaths | None) -> tuple[Backend, dict[str, Definition]]:
    """Read a snapshot and check it belongs to the requested backend.

    ABOUTME: The snapshot's own 'source' field decides where it may go
    ABOUTME: A mismatch with the requested backend is rejected

    Returns:
        Tuple of (recorded source, name -> definition mapping)
    """
    path = get_backup_path(backend, paths)
    data = _parse_snapshot(path, _read_snapshot_text(backend, path))

    source = data.get("source")
    if source not in BACKENDS:
        raise UnknownSourceError(f"Unknown backup source: {source}")
    if source != backend:
        raise UnknownSourceError(
            f"Backup source '{source}' does not match requested backend '{backend}'"
        )

    mcps = data.get("mcps")
    if not isinstance(mcps, dict):
        raise ParseError("Invalid backup format: missing mcps object")

    return source, mcps


def backup_entries(backend: str, paths: ConfigPaths | None = None) -> BackupInfo:
    """Snapshot all current entries of a backend.

    ABOUTME: Overwrites the previous snapshot for this backend
    ABOUTME: Creates the backup directory if it doesn't exist

    Args:
        backend: "opencode" or "claude"
        paths: Optional file locations

    Returns:
        BackupInfo for the file just written

    Raises:
        ParseError: If the live document can't be parsed
        WriteError: If the snapshot can't be written
        PermissionDeniedError: If the OS rejects the write
        ValueError: If backend is unknown

    Examples:
        >>> info = backup_entries("claude")
        >>> info.filename
        'claude_mcps.json'
    """
    store = get_store(backend, paths)
    logger.info(f"Starting {store.name} MCP backup...")

    mcps = store.load()
    backup_path = get_backup_path(backend, paths)
    write_json_file(backup_path, {"source": backend, "mcps": mcps})

    logger.info(f"MCP backup saved: {backup_path}")

    now = datetime.now()
    return BackupInfo(
        filename=backup_path.name,
        source=store.backend,
        mcp_count=len(mcps),
        path=str(backup_path),
        created_at=now.strftime(CREATED_AT_FORMAT),
        timestamp=now.strftime(TIMESTAMP_FORMAT),
    )


def get_backup_info(backend: str, paths: ConfigPaths | None = None) -> BackupInfo | None:
    """Describe the existing snapshot for a backend without touching it.

    ABOUTME: created_at comes from the file modification time
    ABOUTME: Returns None when no snapshot exists

    Raises:
        ParseError: If the snapshot isn't valid JSON
        ValueError: If backend is unknown
    """
    backup_path = get_backup_path(backend, paths)
    if not path_exists(backup_path):
        return None

    data = _parse_snapshot(backup_path, _read_snapshot_text(backend, backup_path))
    mcps = data.get("mcps")
    mcp_count = len(mcps) if isinstance(mcps, dict) else 0

    try:
        modified = backup_path.stat().st_mtime
    except OSError as e:
        raise ParseError(f"Failed to get file metadata for {backup_path}: {e}") from e

    return BackupInfo(
        filename=backup_path.name,
        source=get_store(backend, paths).backend,
        mcp_count=mcp_count,
        path=str(backup_path),
        created_at=datetime.fromtimestamp(modified).strftime(CREATED_AT_FORMAT),
    )


def restore_all(backend: str, paths: ConfigPaths | None = None) -> str:
    """Restore every snapshot entry into the live backend store.

    ABOUTME: Merges into existing entries, never clears the store first
    ABOUTME: Live entries missing from the snapshot survive untouched

    Returns:
        Human-readable summary

    Raises:
        NotFoundError: If no snapshot exists
        UnknownSourceError: If the snapshot's source is unknown or mismatched
        ParseError: If the snapshot is malformed
        WriteError: If the live document can't be written
    """
    logger.info(f"Restoring MCP backup for: {backend}")
    source, mcps = _load_snapshot(backend, paths)

    store = get_store(source, paths)
    restored_count = store.upsert_many(mcps)

    logger.info(f"Restored {restored_count} MCPs from backup")
    return f"Successfully restored {restored_count} MCPs to {store.name}"


def restore_one(backend: str, name: str, paths: ConfigPaths | None = None) -> str:
    """Restore a single named entry from the snapshot.

    Returns:
        Human-readable summary

    Raises:
        NotFoundError: If no snapshot exists or it has no entry by that name
        UnknownSourceError: If the snapshot's source is unknown or mismatched
        ParseError: If the snapshot is malformed
        WriteError: If the live document can't be written
    """
    logger.info(f"Restoring single MCP '{name}' from backup")
    source, mcps = _load_snapshot(backend, paths)

    if name not in mcps:
        raise NotFoundError(f"MCP '{name}' not found in backup")

    store = get_store(source, paths)
    store.upsert(name, mcps[name])

    logger.info(f"Restored MCP '{name}' from backup")
    return f"Successfully restored '{name}' to {store.name}"


def read_backup_raw(backend: str, paths: ConfigPaths | None = None) -> str:
    """Return the snapshot file's text exactly as stored.

    Raises:
        NotFoundError: If no snapshot exists
        ValueError: If backend is unknown
    """
    return _read_snapshot_text(backend, get_backup_path(backend, paths))
