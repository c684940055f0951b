# ABOUTME: Shared fixtures for mcpbridge tests
# ABOUTME: Every file lives under tmp_path, the real home directory is never touched
from pathlib import Path

import pytest

from mcpbridge.config import (
    BACKUP_DIR_ENV,
    CLAUDE_CONFIG_ENV,
    OPENCODE_CONFIG_ENV,
    ConfigPaths,
)


@pytest.fixture
def paths(tmp_path: Path) -> ConfigPaths:
    """ConfigPaths laid out below tmp_path, parent directories created."""
    result = ConfigPaths.under(tmp_path)
    result.opencode_path.parent.mkdir(parents=True, exist_ok=True)
    return result


@pytest.fixture
def env_paths(paths: ConfigPaths, monkeypatch: pytest.MonkeyPatch) -> ConfigPaths:
    """Point the default path resolution at tmp_path via environment overrides."""
    monkeypatch.setenv(OPENCODE_CONFIG_ENV, str(paths.opencode_path))
    monkeypatch.setenv(CLAUDE_CONFIG_ENV, str(paths.claude_path))
    monkeypatch.setenv(BACKUP_DIR_ENV, str(paths.backup_dir))
    return paths
