# Config store registry
from mcpbridge.config import ConfigPaths, resolve_paths
from mcpbridge.models import BACKENDS, ConfigStore
from mcpbridge.stores.claude import ClaudeStore
from mcpbridge.stores.opencode import OpenCodeStore

__all__ = [
    "ConfigStore",
    "OpenCodeStore",
    "ClaudeStore",
    "get_store",
    "get_all_stores",
    "validate_backend",
]


def validate_backend(backend: str) -> None:
    """Reject backend ids other than 'opencode' and 'claude'.

    Raises:
        ValueError: If backend is unknown
    """
    if backend not in BACKENDS:
        raise ValueError(
            f"Unknown backend '{backend}'. Must be 'opencode' or 'claude'."
        )


def get_store(backend: str, paths: ConfigPaths | None = None) -> ConfigStore:
    """Instantiate the store for one backend.

    ABOUTME: Paths default to the per-OS locations

    Raises:
        ValueError: If backend is unknown
    """
    validate_backend(backend)
    paths = resolve_paths(paths)
    if backend == "opencode":
        return OpenCodeStore(paths.opencode_path)
    return ClaudeStore(paths.claude_path)


def get_all_stores(paths: ConfigPaths | None = None) -> list[ConfigStore]:
    """Return both stores, OpenCode first."""
    paths = resolve_paths(paths)
    return [get_store(backend, paths) for backend in BACKENDS]
