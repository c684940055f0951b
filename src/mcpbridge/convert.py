# ABOUTME: Field-level conversion between OpenCode and Claude Code MCP definitions.
# ABOUTME: Pure functions over plain dicts, no I/O and no shared state.
import copy
from typing import Any

from mcpbridge.models import Definition
from mcpbridge.stores import validate_backend

# ABOUTME: Fields both backends understand with identical meaning
SHARED_FIELDS = ("url", "headers", "transport", "timeout")


def opencode_to_claude(config: Definition) -> Definition:
    """Convert an OpenCode definition to Claude Code format.

    ABOUTME: command list is split into command + args
    ABOUTME: enabled/description are dropped, Claude Code has no equivalent
    ABOUTME: type is derived from url/command, any OpenCode type is ignored

    OpenCode::

        {"type": "local", "command": ["npx", "-y", "pkg"],
         "environment": {"KEY": "value"}, "enabled": true, "description": "..."}

    Claude Code::

        {"command": "npx", "args": ["-y", "pkg"], "env": {"KEY": "value"},
         "type": "stdio"}

    Args:
        config: OpenCode definition

    Returns:
        New dict in Claude Code shape
    """
    result: dict[str, Any] = {}

    command = config.get("command")
    if isinstance(command, list):
        if command:
            result["command"] = copy.deepcopy(command[0])
            if len(command) > 1:
                result["args"] = copy.deepcopy(command[1:])
    elif "command" in config:
        result["command"] = copy.deepcopy(command)

    if "environment" in config:
        result["env"] = copy.deepcopy(config["environment"])

    for key in SHARED_FIELDS:
        if key in config:
            result[key] = copy.deepcopy(config[key])

    if "url" in config:
        result["type"] = "http"
    elif "command" in config:
        result["type"] = "stdio"

    return result


def claude_to_opencode(config: Definition) -> Definition:
    """Convert a Claude Code definition to OpenCode format.

    ABOUTME: command + args are merged into one command list
    ABOUTME: enabled is always true, type is local unless a url is present

    Args:
        config: Claude Code definition

    Returns:
        New dict in OpenCode shape
    """
    result: dict[str, Any] = {
        "type": "remote" if "url" in config else "local",
        "enabled": True,
    }

    merged_command: list[Any] = []
    command = config.get("command")
    if isinstance(command, str):
        merged_command.append(command)
    elif isinstance(command, list):
        merged_command.extend(copy.deepcopy(command))

    args = config.get("args")
    if isinstance(args, list):
        merged_command.extend(copy.deepcopy(args))

    if merged_command:
        result["command"] = merged_command

    if "env" in config:
        result["environment"] = copy.deepcopy(config["env"])

    for key in (*SHARED_FIELDS, "description"):
        if key in config:
            result[key] = copy.deepcopy(config[key])

    return result


def convert(config: Definition, from_backend: str, to_backend: str) -> Definition:
    """Reshape a definition for another backend.

    ABOUTME: Same backend on both sides returns an unconverted copy

    Raises:
        ValueError: If either backend id is unknown
    """
    validate_backend(from_backend)
    validate_backend(to_backend)

    if from_backend == to_backend:
        return copy.deepcopy(config)
    if to_backend == "opencode":
        return claude_to_opencode(config)
    return opencode_to_claude(config)
