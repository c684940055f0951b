# Sync orchestration for mcpbridge
import json
import logging
from dataclasses import dataclass, field

from mcpbridge.config import ConfigPaths, resolve_paths
from mcpbridge.convert import convert
from mcpbridge.models import Definition
from mcpbridge.stores import get_store, validate_backend
from mcpbridge.utils import parse_definition

logger = logging.getLogger(__name__)


@dataclass
class SyncPreview:
    """Entry names present in only one backend.

    ABOUTME: Names are sorted for stable output
    """
    only_in_opencode: list[str] = field(default_factory=list)
    only_in_claude: list[str] = field(default_factory=list)

    @property
    def in_sync(self) -> bool:
        """True when both backends hold the same names."""
        return not self.only_in_opencode and not self.only_in_claude


@dataclass
class SyncReport:
    """Report from a bulk sync operation.

    ABOUTME: synced lists names written to the destination
    ABOUTME: skipped lists names the destination already had
    """
    from_backend: str
    to_backend: str
    synced: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)

    def add_synced(self, name: str) -> None:
        """Record an entry written to the destination."""
        self.synced.append(name)

    def add_skipped(self, name: str) -> None:
        """Record an entry left alone because the destination has it."""
        self.skipped.append(name)


def sync_entry(
    name: str,
    from_backend: str,
    to_backend: str,
    raw: str | Definition,
    paths: ConfigPaths | None = None,
) -> Definition:
    """Convert one definition and write it into the destination backend.

    ABOUTME: Same backend on both sides writes the definition unconverted
    ABOUTME: Replaces any destination entry of that name, no field merge
    ABOUTME: Never touches the source store, no rollback on failure

    Args:
        name: Entry name in the destination
        from_backend: Backend whose schema raw is written in
        to_backend: Backend to write into
        raw: Definition as JSON text or dict
        paths: Optional file locations

    Returns:
        The definition written to the destination

    Raises:
        ParseError: If raw is not a JSON object, or the destination is malformed
        WriteError: If the destination can't be written
        PermissionDeniedError: If the OS rejects the write
        ValueError: If either backend id is unknown

    Examples:
        >>> sync_entry("fs", "opencode", "claude", '{"command": ["npx", "fs"]}')
        {'command': 'npx', 'args': ['fs'], 'type': 'stdio'}
    """
    validate_backend(from_backend)
    validate_backend(to_backend)
    logger.info(f"Syncing MCP '{name}' from {from_backend} to {to_backend}")

    config = parse_definition(raw)

    if from_backend != to_backend:
        logger.info(f"Converting {from_backend} format to {to_backend} format")
    converted = convert(config, from_backend, to_backend)
    logger.debug(f"Converted config: {json.dumps(converted, indent=2, default=str)}")

    get_store(to_backend, paths).upsert(name, converted)
    return converted


def preview_sync(paths: ConfigPaths | None = None) -> SyncPreview:
    """Compare entry names across both backends.

    Raises:
        ParseError: If either document can't be parsed
    """
    paths = resolve_paths(paths)
    opencode_names = set(get_store("opencode", paths).load())
    claude_names = set(get_store("claude", paths).load())

    return SyncPreview(
        only_in_opencode=sorted(opencode_names - claude_names),
        only_in_claude=sorted(claude_names - opencode_names),
    )


def sync_missing(
    from_backend: str,
    to_backend: str,
    paths: ConfigPaths | None = None,
) -> SyncReport:
    """Sync every entry the destination doesn't have yet.

    ABOUTME: Entries already present in the destination are skipped
    ABOUTME: Stops at the first failure, earlier entries stay written

    Raises:
        ValueError: If the backends are unknown or identical
        MCPBridgeError: Whatever the failing sync_entry raised
    """
    validate_backend(from_backend)
    validate_backend(to_backend)
    if from_backend == to_backend:
        raise ValueError("Source and destination backends must differ")

    paths = resolve_paths(paths)
    source = get_store(from_backend, paths).load()
    existing = get_store(to_backend, paths).load()
    report = SyncReport(from_backend=from_backend, to_backend=to_backend)

    for name, config in source.items():
        if name in existing:
            report.add_skipped(name)
            continue
        sync_entry(name, from_backend, to_backend, config, paths)
        report.add_synced(name)

    logger.info(
        f"Synced {len(report.synced)} MCPs from {from_backend} to {to_backend}, "
        f"{len(report.skipped)} already present"
    )
    return report
