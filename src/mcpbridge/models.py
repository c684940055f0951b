# Core data models for mcpbridge
import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Literal, Protocol, runtime_checkable

# ABOUTME: Backend ids, also used as snapshot "source" values
Backend = Literal["opencode", "claude"]

BACKENDS: tuple[Backend, ...] = ("opencode", "claude")

# ABOUTME: Raw server definition as stored by either backend (JSON object)
Definition = dict[str, Any]


@dataclass(frozen=True)
class MCPEntry:
    """One named MCP server definition as found in a backend store.

    ABOUTME: config is kept opaque so unknown fields survive a save
    ABOUTME: enabled/description only carry meaning for OpenCode entries
    """
    name: str
    config: Definition
    backend: Backend
    enabled: bool = True
    description: str | None = None

    @property
    def config_json(self) -> str:
        """Definition pretty-printed for display."""
        return json.dumps(self.config, indent=2, ensure_ascii=False)


@dataclass
class MCPList:
    """Entries of both backends, as returned by list_entries()."""
    opencode: list[MCPEntry] = field(default_factory=list)
    claude: list[MCPEntry] = field(default_factory=list)

    def for_backend(self, backend: Backend) -> list[MCPEntry]:
        """Return the entries belonging to one backend."""
        return self.opencode if backend == "opencode" else self.claude


@dataclass(frozen=True)
class BackupInfo:
    """Metadata describing a per-backend snapshot file.

    ABOUTME: timestamp is only filled in for a backup taken just now
    """
    filename: str
    source: Backend
    mcp_count: int
    path: str
    created_at: str
    timestamp: str = ""


@runtime_checkable
class ConfigStore(Protocol):
    """Protocol for per-backend MCP config stores.

    ABOUTME: Each store owns one JSON document on disk
    ABOUTME: Uses @runtime_checkable for isinstance() support
    """

    @property
    def backend(self) -> Backend:
        """Backend id of this store."""
        ...

    @property
    def name(self) -> str:
        """Human-readable backend name."""
        ...

    @property
    def config_path(self) -> Path:
        """Path to the backend's JSON document."""
        ...

    def load(self) -> dict[str, Definition]:
        """Load the name -> definition mapping."""
        ...

    def save(self, servers: dict[str, Definition]) -> None:
        """Replace the mapping, preserving unrelated document fields."""
        ...

    def get(self, name: str) -> Definition:
        """Return one definition by name."""
        ...

    def upsert(self, name: str, definition: Definition) -> bool:
        """Insert or overwrite one definition, True if it replaced one."""
        ...

    def upsert_many(self, definitions: dict[str, Definition]) -> int:
        """Insert or overwrite several definitions in one rewrite."""
        ...

    def remove(self, name: str) -> None:
        """Delete one definition by name."""
        ...
