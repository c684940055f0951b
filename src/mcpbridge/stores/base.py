# Config store base utilities
import json
import logging
from pathlib import Path
from typing import Any

from mcpbridge.errors import NotFoundError, ParseError, PermissionDeniedError, WriteError
from mcpbridge.models import Backend, Definition

logger = logging.getLogger(__name__)


def path_exists(path: Path) -> bool:
    """Check whether a file exists.

    Raises:
        PermissionDeniedError: If a parent directory can't be searched
    """
    try:
        return path.exists()
    except PermissionError as e:
        raise PermissionDeniedError(f"Cannot access {path}: {e}") from e


def read_json_file(path: Path) -> dict[str, Any]:
    """Read a JSON document with error handling.

    ABOUTME: Returns empty dict if file doesn't exist
    ABOUTME: Raises ParseError for invalid JSON or a non-object document

    Args:
        path: Path to the JSON file

    Returns:
        Parsed top-level object

    Raises:
        ParseError: If the file can't be read or isn't a JSON object
        PermissionDeniedError: If the OS rejects the read
    """
    if not path_exists(path):
        return {}

    try:
        with open(path, encoding="utf-8") as f:
            result = json.load(f)
    except PermissionError as e:
        raise PermissionDeniedError(f"Cannot read {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ParseError(f"Failed to parse {path}: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise ParseError(f"Failed to read {path}: {e}") from e

    if not isinstance(result, dict):
        raise ParseError(f"Failed to parse {path}: top-level value must be a JSON object")
    return result


def write_json_file(path: Path, data: dict[str, Any]) -> None:
    """Write a JSON document, replacing the whole file.

    ABOUTME: Creates parent directories if needed
    ABOUTME: 2-space indentation, key order kept, trailing newline
    ABOUTME: NaN and Infinity are not valid JSON and raise WriteError

    Raises:
        WriteError: If serialization or the write fails
        PermissionDeniedError: If the OS rejects the write
    """
    try:
        content = json.dumps(data, indent=2, ensure_ascii=False, allow_nan=False)
    except (TypeError, ValueError) as e:
        raise WriteError(f"Failed to serialize config for {path}: {e}") from e

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            f.write(content)
            f.write("\n")
    except PermissionError as e:
        raise PermissionDeniedError(f"Cannot write {path}: {e}") from e
    except OSError as e:
        raise WriteError(f"Failed to write {path}: {e}") from e


class JsonConfigStore:
    """Name -> definition mapping nested under one key of a JSON document.

    ABOUTME: Subclasses pick the backend id, display name and servers key
    ABOUTME: Every call goes back to disk, nothing is cached between calls
    ABOUTME: Mutations rewrite the whole document, no locking
    """

    backend: Backend
    name: str
    servers_key: str

    def __init__(self, config_path: Path) -> None:
        self._config_path = config_path

    @property
    def config_path(self) -> Path:
        """Path to the backend's JSON document."""
        return self._config_path

    def read_document(self) -> dict[str, Any]:
        """Load the full document, validating the servers section.

        ABOUTME: Missing file is an empty document, never an error
        """
        logger.info(f"Loading {self.name} config from: {self._config_path}")
        if not path_exists(self._config_path):
            logger.warning(f"{self.name} config not found: {self._config_path}")
            return {}

        data = read_json_file(self._config_path)
        servers = data.get(self.servers_key, {})
        if not isinstance(servers, dict):
            raise ParseError(
                f"Failed to parse {self._config_path}: "
                f"'{self.servers_key}' must be a JSON object"
            )
        return data

    def write_document(self, data: dict[str, Any]) -> None:
        """Overwrite the full document."""
        logger.info(f"Saving {self.name} config to: {self._config_path}")
        write_json_file(self._config_path, data)

    def load(self) -> dict[str, Definition]:
        """Load existing MCP servers from the backend document.

        ABOUTME: Returns empty dict if config doesn't exist
        """
        return dict(self.read_document().get(self.servers_key, {}))

    def save(self, servers: dict[str, Definition]) -> None:
        """Save MCP servers, keeping every other top-level field.

        ABOUTME: Creates file if missing
        """
        # Read existing config to preserve any non-MCP settings
        existing_data = self.read_document()
        existing_data[self.servers_key] = dict(servers)
        self.write_document(existing_data)

    def get(self, name: str) -> Definition:
        """Return a single definition.

        Raises:
            NotFoundError: If no entry has this name
        """
        servers = self.load()
        if name not in servers:
            raise NotFoundError(f"MCP '{name}' not found in {self.name} config")
        return servers[name]

    def upsert(self, name: str, definition: Definition) -> bool:
        """Insert or overwrite one entry (full replace, no field merge).

        Returns:
            True if an entry of that name was replaced
        """
        data = self.read_document()
        servers = dict(data.get(self.servers_key, {}))
        replaced = name in servers
        servers[name] = definition
        data[self.servers_key] = servers
        self.write_document(data)
        return replaced

    def upsert_many(self, definitions: dict[str, Definition]) -> int:
        """Insert or overwrite several entries with a single rewrite.

        Returns:
            Number of entries written
        """
        data = self.read_document()
        servers = dict(data.get(self.servers_key, {}))
        servers.update(definitions)
        data[self.servers_key] = servers
        self.write_document(data)
        return len(definitions)

    def remove(self, name: str) -> None:
        """Delete one entry.

        Raises:
            NotFoundError: If no entry has this name
        """
        data = self.read_document()
        servers = dict(data.get(self.servers_key, {}))
        if name not in servers:
            raise NotFoundError(f"MCP '{name}' not found in {self.name} config")
        del servers[name]
        data[self.servers_key] = servers
        self.write_document(data)
