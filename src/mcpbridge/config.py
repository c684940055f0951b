# Path configuration for mcpbridge
import os
import sys
from dataclasses import dataclass
from pathlib import Path

# ABOUTME: Environment variables that override the per-OS default locations
OPENCODE_CONFIG_ENV = "MCPBRIDGE_OPENCODE_CONFIG"
CLAUDE_CONFIG_ENV = "MCPBRIDGE_CLAUDE_CONFIG"
BACKUP_DIR_ENV = "MCPBRIDGE_BACKUP_DIR"


def _get_base_path() -> Path:
    """Get the per-user config directory for the current OS.

    ABOUTME: %APPDATA% on Windows, ~/.config everywhere else
    """
    if sys.platform == "win32":
        return Path(os.environ.get("APPDATA", Path.home() / "AppData/Roaming"))
    return Path.home() / ".config"


def _from_env(var_name: str, default: Path) -> Path:
    value = os.environ.get(var_name)
    if value:
        return Path(value).expanduser()
    return default


def get_opencode_config_path() -> Path:
    """Return the OpenCode config path (opencode/opencode.json)."""
    return _from_env(OPENCODE_CONFIG_ENV, _get_base_path() / "opencode" / "opencode.json")


def get_claude_config_path() -> Path:
    """Return the Claude Code config path (~/.claude.json)."""
    return _from_env(CLAUDE_CONFIG_ENV, Path.home() / ".claude.json")


def get_backup_dir() -> Path:
    """Get the default snapshot directory path.

    ABOUTME: Does not create the directory

    Returns:
        Path to the directory holding one snapshot file per backend
    """
    if sys.platform == "win32":
        default = _get_base_path() / "OpenClaude-Tools" / ".openclaudesync"
    else:
        default = _get_base_path() / "openclaude-tools" / ".openclaudesync"
    return _from_env(BACKUP_DIR_ENV, default)


@dataclass(frozen=True)
class ConfigPaths:
    """Locations of every file mcpbridge touches.

    ABOUTME: Passed into stores and operations instead of global lookups
    ABOUTME: Tests build one under tmp_path to stay off the real home dir
    """
    opencode_path: Path
    claude_path: Path
    backup_dir: Path

    @classmethod
    def default(cls) -> "ConfigPaths":
        """Resolve paths for the current user and OS."""
        return cls(
            opencode_path=get_opencode_config_path(),
            claude_path=get_claude_config_path(),
            backup_dir=get_backup_dir(),
        )

    @classmethod
    def under(cls, root: Path) -> "ConfigPaths":
        """Lay out all files below a single directory."""
        return cls(
            opencode_path=root / "opencode" / "opencode.json",
            claude_path=root / ".claude.json",
            backup_dir=root / "backups",
        )


def resolve_paths(paths: ConfigPaths | None) -> ConfigPaths:
    """Return paths, falling back to the per-OS defaults."""
    return paths if paths is not None else ConfigPaths.default()


def get_config_paths(paths: ConfigPaths | None = None) -> dict[str, str]:
    """Return the resolved locations for display.

    Returns:
        Dict with "opencode", "claude" and "backup" keys
    """
    paths = resolve_paths(paths)
    return {
        "opencode": str(paths.opencode_path),
        "claude": str(paths.claude_path),
        "backup": str(paths.backup_dir),
    }
