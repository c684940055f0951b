# Single-backend entry operations for mcpbridge
import logging
from typing import Any

from mcpbridge.config import ConfigPaths, resolve_paths
from mcpbridge.errors import NotFoundError
from mcpbridge.models import BACKENDS, Backend, Definition, MCPEntry, MCPList
from mcpbridge.stores import get_store
from mcpbridge.utils import parse_definition

logger = logging.getLogger(__name__)


def entry_from_definition(name: str, config: Any, backend: Backend) -> MCPEntry:
    """Build an MCPEntry, deriving enabled/description for OpenCode.

    ABOUTME: enabled defaults to True unless a boolean says otherwise
    ABOUTME: Claude Code entries are always enabled with no description
    """
    if backend == "opencode" and isinstance(config, dict):
        enabled = config.get("enabled")
        description = config.get("description")
        return MCPEntry(
            name=name,
            config=config,
            backend=backend,
            enabled=enabled if isinstance(enabled, bool) else True,
            description=description if isinstance(description, str) else None,
        )
    return MCPEntry(name=name, config=config, backend=backend)


def list_entries(paths: ConfigPaths | None = None) -> MCPList:
    """Load both backends and annotate every entry.

    ABOUTME: Missing documents give empty lists
    ABOUTME: A malformed document of either backend fails the whole call

    Raises:
        ParseError: If either document can't be parsed
    """
    paths = resolve_paths(paths)
    result = MCPList()

    for backend in BACKENDS:
        store = get_store(backend, paths)
        for name, config in store.load().items():
            result.for_backend(backend).append(entry_from_definition(name, config, backend))

    logger.info(
        f"Found {len(result.opencode)} OpenCode MCPs, {len(result.claude)} Claude MCPs"
    )
    return result


def add_entry(
    name: str,
    raw_json: str | Definition,
    backend: str,
    description: str | None = None,
    paths: ConfigPaths | None = None,
) -> Definition:
    """Add an entry to one backend.

    ABOUTME: Overwrites an existing entry of the same name
    ABOUTME: OpenCode entries get enabled=true unless the payload says otherwise

    Args:
        name: Entry name
        raw_json: Definition as JSON text or dict
        backend: "opencode" or "claude"
        description: Stored for OpenCode only
        paths: Optional file locations

    Returns:
        The definition as written

    Raises:
        ParseError: If the payload is not a JSON object
        ValueError: If backend is unknown
    """
    logger.info(f"Adding MCP: {name} to {backend}")
    store = get_store(backend, paths)
    config = dict(parse_definition(raw_json))

    if backend == "opencode":
        config.setdefault("enabled", True)
        if description is not None:
            config["description"] = description

    if store.upsert(name, config):
        logger.info(f"Replaced existing MCP '{name}' in {store.name} config")
    return config


def update_entry(
    name: str,
    raw_json: str | Definition,
    backend: str,
    description: str | None = None,
    paths: ConfigPaths | None = None,
) -> Definition:
    """Replace an existing entry in one backend.

    Raises:
        NotFoundError: If the entry doesn't exist
        ParseError: If the payload is not a JSON object
        ValueError: If backend is unknown
    """
    logger.info(f"Updating MCP: {name} in {backend}")
    store = get_store(backend, paths)
    config = dict(parse_definition(raw_json))

    if name not in store.load():
        raise NotFoundError(f"MCP '{name}' not found in {store.name} config")

    if backend == "opencode" and description is not None:
        config["description"] = description

    store.upsert(name, config)
    return config


def delete_entry(name: str, backend: str, paths: ConfigPaths | None = None) -> None:
    """Delete an entry from one backend.

    Raises:
        NotFoundError: If the entry doesn't exist
        ValueError: If backend is unknown
    """
    logger.info(f"Deleting MCP: {name} from {backend}")
    get_store(backend, paths).remove(name)
