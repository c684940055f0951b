# ABOUTME: Payload checks and display helpers for raw MCP definitions
# ABOUTME: Only checks JSON structure, never launches commands or probes URLs
import json
from typing import Any, Literal

from mcpbridge.errors import ParseError
from mcpbridge.models import Definition, MCPEntry


def parse_definition(raw: str | Definition) -> Definition:
    """Parse and check a raw definition payload.

    ABOUTME: Accepts JSON text or an already decoded dict
    ABOUTME: Anything but a JSON object is rejected

    Args:
        raw: JSON text or dict

    Returns:
        The definition as a dict

    Raises:
        ParseError: If the text is not valid JSON or not an object

    Examples:
        >>> parse_definition('{"command": "npx"}')
        {'command': 'npx'}
        >>> parse_definition('[1, 2]')
        Traceback (most recent call last):
        ...
        mcpbridge.errors.ParseError: Invalid JSON config: expected a JSON object, got list
    """
    if isinstance(raw, str):
        try:
            value: Any = json.loads(raw)
        except json.JSONDecodeError as e:
            raise ParseError(f"Invalid JSON config: {e}") from e
    else:
        value = raw

    if not isinstance(value, dict):
        raise ParseError(
            f"Invalid JSON config: expected a JSON object, got {type(value).__name__}"
        )
    return value


def display_type(config: Any) -> Literal["local", "remote"]:
    """Classify a definition of either backend as local or remote.

    ABOUTME: stdio/local type or any command means local
    ABOUTME: A stored value that isn't an object counts as remote
    """
    if not isinstance(config, dict):
        return "remote"
    if config.get("type") in ("stdio", "local") or config.get("command"):
        return "local"
    return "remote"


def describe(entry: MCPEntry) -> str:
    """One-line summary of an entry for listings.

    ABOUTME: Prefers description, then url, then the full command line
    """
    if entry.description:
        return entry.description

    config = entry.config
    if not isinstance(config, dict):
        return ""
    if config.get("url"):
        return str(config["url"])

    command = config.get("command")
    if isinstance(command, list):
        return " ".join(str(part) for part in command)
    if command:
        args = config.get("args")
        if not isinstance(args, list):
            args = []
        return " ".join(str(part) for part in [command, *args])

    return ""
