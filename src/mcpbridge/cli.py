# CLI interface for mcpbridge
import argparse
import logging
import sys
from collections.abc import Callable

from mcpbridge import __version__
from mcpbridge.config import ConfigPaths, get_config_paths
from mcpbridge.entries import add_entry, delete_entry, list_entries, update_entry
from mcpbridge.errors import MCPBridgeError, NotFoundError, ParseError
from mcpbridge.models import BACKENDS
from mcpbridge.stores import get_store
from mcpbridge.sync import preview_sync, sync_entry, sync_missing
from mcpbridge.utils import (
    backup_entries,
    describe,
    display_type,
    get_backup_info,
    read_backup_raw,
    restore_all,
    restore_one,
)

logger = logging.getLogger(__name__)

# ABOUTME: Exit codes
# 0 = success, 2 = user/config error, 3 = fatal (write/permission/unexpected)
EXIT_SUCCESS = 0
EXIT_CONFIG_ERROR = 2
EXIT_FATAL = 3

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def cmd_list(args: argparse.Namespace) -> int:
    """Execute list command.

    ABOUTME: Shows entries of both backends, or of one with --backend
    """
    paths = ConfigPaths.default()
    mcp_list = list_entries(paths)
    backends = [args.backend] if args.backend else list(BACKENDS)

    for backend in backends:
        store = get_store(backend, paths)
        entries = mcp_list.for_backend(backend)
        print(f"{store.name} ({store.config_path}):")
        if not entries:
            print("  (no MCP servers)")
        for entry in entries:
            state = "" if entry.enabled else " [disabled]"
            print(f"  {entry.name} ({display_type(entry.config)}){state}")
            summary = describe(entry)
            if summary:
                print(f"    {summary}")
        print()

    total = sum(len(mcp_list.for_backend(b)) for b in backends)
    print(f"Total: {total} server(s)")
    return EXIT_SUCCESS


def cmd_add(args: argparse.Namespace) -> int:
    """Execute add command.

    ABOUTME: Replaces an existing entry of the same name
    """
    paths = ConfigPaths.default()
    store = get_store(args.backend, paths)
    if args.name in store.load():
        print(f"Warning: Server '{args.name}' already exists. It will be replaced.")

    add_entry(args.name, args.json, args.backend, args.description, paths)
    print(f"Server '{args.name}' added to {store.name}.")
    return EXIT_SUCCESS


def cmd_update(args: argparse.Namespace) -> int:
    """Execute update command."""
    paths = ConfigPaths.default()
    update_entry(args.name, args.json, args.backend, args.description, paths)
    print(f"Server '{args.name}' updated in {get_store(args.backend, paths).name}.")
    return EXIT_SUCCESS


def cmd_delete(args: argparse.Namespace) -> int:
    """Execute delete command."""
    paths = ConfigPaths.default()
    delete_entry(args.name, args.backend, paths)
    print(f"Server '{args.name}' removed from {get_store(args.backend, paths).name}.")
    return EXIT_SUCCESS


def cmd_sync(args: argparse.Namespace) -> int:
    """Execute sync command.

    ABOUTME: Reads the entry from the source store, then converts and writes it
    """
    paths = ConfigPaths.default()
    source = get_store(args.from_backend, paths)
    destination = get_store(args.to_backend, paths)

    config = source.get(args.name)
    sync_entry(args.name, args.from_backend, args.to_backend, config, paths)
    print(f"Server '{args.name}' synced from {source.name} to {destination.name}.")
    return EXIT_SUCCESS


def cmd_sync_missing(args: argparse.Namespace) -> int:
    """Execute sync-missing command."""
    paths = ConfigPaths.default()
    report = sync_missing(args.from_backend, args.to_backend, paths)
    destination = get_store(args.to_backend, paths)

    for name in report.synced:
        print(f"  {name} -> {destination.name}")
    print(
        f"Sync complete: {len(report.synced)} synced, "
        f"{len(report.skipped)} already present"
    )
    return EXIT_SUCCESS


def cmd_preview(args: argparse.Namespace) -> int:
    """Execute preview command."""
    preview = preview_sync(ConfigPaths.default())

    if preview.in_sync:
        print("All MCPs are synchronized.")
        return EXIT_SUCCESS

    if preview.only_in_opencode:
        print(f"Only in OpenCode ({len(preview.only_in_opencode)}):")
        for name in preview.only_in_opencode:
            print(f"  {name}")
    if preview.only_in_claude:
        print(f"Only in Claude Code ({len(preview.only_in_claude)}):")
        for name in preview.only_in_claude:
            print(f"  {name}")
    return EXIT_SUCCESS


def cmd_backup(args: argparse.Namespace) -> int:
    """Execute backup command."""
    info = backup_entries(args.backend, ConfigPaths.default())
    print(f"Backed up {info.mcp_count} MCP(s) to {info.path}")
    return EXIT_SUCCESS


def cmd_backup_info(args: argparse.Namespace) -> int:
    """Execute backup-info command."""
    info = get_backup_info(args.backend, ConfigPaths.default())
    if info is None:
        print(f"No backup found for {args.backend}.")
        return EXIT_SUCCESS

    print(f"  file: {info.path}")
    print(f"  source: {info.source}")
    print(f"  servers: {info.mcp_count}")
    print(f"  modified: {info.created_at}")
    return EXIT_SUCCESS


def cmd_restore(args: argparse.Namespace) -> int:
    """Execute restore command.

    ABOUTME: Restores every entry, or only --name
    """
    paths = ConfigPaths.default()
    if args.name is not None:
        message = restore_one(args.backend, args.name, paths)
    else:
        message = restore_all(args.backend, paths)
    print(message)
    return EXIT_SUCCESS


def cmd_show_backup(args: argparse.Namespace) -> int:
    """Execute show-backup command."""
    content = read_backup_raw(args.backend, ConfigPaths.default())
    print(content, end="" if content.endswith("\n") else "\n")
    return EXIT_SUCCESS


def cmd_paths(args: argparse.Namespace) -> int:
    """Execute paths command."""
    for key, value in get_config_paths(ConfigPaths.default()).items():
        print(f"  {key}: {value}")
    return EXIT_SUCCESS


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="mcpbridge",
        description="Manage and sync MCP servers between OpenCode and Claude Code"
    )

    parser.add_argument(
        "--version", "-V",
        action="version",
        version=f"mcpbridge v{__version__}"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # list command
    list_parser = subparsers.add_parser(
        "list",
        help="List MCP servers of both backends"
    )
    list_parser.add_argument(
        "--backend",
        choices=BACKENDS,
        help="Only list one backend"
    )

    # add / update commands
    for command, help_text in (
        ("add", "Add an MCP server (replaces an existing one)"),
        ("update", "Replace an existing MCP server"),
    ):
        entry_parser = subparsers.add_parser(command, help=help_text)
        entry_parser.add_argument(
            "name",
            help="Name of the MCP server"
        )
        entry_parser.add_argument(
            "--backend",
            choices=BACKENDS,
            required=True,
            help="Backend to write to"
        )
        entry_parser.add_argument(
            "--json",
            required=True,
            help="Server definition as a JSON object, in the backend's format"
        )
        entry_parser.add_argument(
            "--description",
            help="Description (OpenCode only)"
        )

    # delete command
    delete_parser = subparsers.add_parser(
        "delete",
        help="Delete an MCP server"
    )
    delete_parser.add_argument(
        "name",
        help="Name of the MCP server to delete"
    )
    delete_parser.add_argument(
        "--backend",
        choices=BACKENDS,
        required=True,
        help="Backend to delete from"
    )

    # sync / sync-missing commands
    sync_parser = subparsers.add_parser(
        "sync",
        help="Copy one MCP server to another backend, converting its format"
    )
    sync_parser.add_argument(
        "name",
        help="Name of the MCP server to sync"
    )
    sync_missing_parser = subparsers.add_parser(
        "sync-missing",
        help="Copy every MCP server the destination doesn't have"
    )
    for sub in (sync_parser, sync_missing_parser):
        sub.add_argument(
            "--from",
            dest="from_backend",
            choices=BACKENDS,
            required=True,
            help="Source backend"
        )
        sub.add_argument(
            "--to",
            dest="to_backend",
            choices=BACKENDS,
            required=True,
            help="Destination backend"
        )

    # preview command
    subparsers.add_parser(
        "preview",
        help="Show servers present in only one backend"
    )

    # backup commands
    for command, help_text in (
        ("backup", "Snapshot a backend's MCP servers (overwrites the previous snapshot)"),
        ("backup-info", "Show the snapshot of a backend"),
        ("show-backup", "Print the raw snapshot file"),
    ):
        backup_parser = subparsers.add_parser(command, help=help_text)
        backup_parser.add_argument(
            "backend",
            choices=BACKENDS,
            help="Backend id"
        )

    restore_parser = subparsers.add_parser(
        "restore",
        help="Restore MCP servers from a backend's snapshot"
    )
    restore_parser.add_argument(
        "backend",
        choices=BACKENDS,
        help="Backend id"
    )
    restore_parser.add_argument(
        "--name",
        help="Restore only this server"
    )

    # paths command
    subparsers.add_parser(
        "paths",
        help="Show config and backup locations"
    )

    return parser


COMMANDS: dict[str, Callable[[argparse.Namespace], int]] = {
    "list": cmd_list,
    "add": cmd_add,
    "update": cmd_update,
    "delete": cmd_delete,
    "sync": cmd_sync,
    "sync-missing": cmd_sync_missing,
    "preview": cmd_preview,
    "backup": cmd_backup,
    "backup-info": cmd_backup_info,
    "restore": cmd_restore,
    "show-backup": cmd_show_backup,
    "paths": cmd_paths,
}


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point.

    ABOUTME: Parses args and dispatches to appropriate command
    ABOUTME: Turns mcpbridge errors into messages and exit codes
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format=LOG_FORMAT,
    )

    handler = COMMANDS.get(args.command)
    if handler is None:
        # No command specified, show help
        parser.print_help()
        return EXIT_SUCCESS

    try:
        return handler(args)
    except (NotFoundError, ParseError, ValueError) as e:
        print(f"Error: {e}")
        return EXIT_CONFIG_ERROR
    except MCPBridgeError as e:
        print(f"Fatal error: {e}")
        return EXIT_FATAL
    except Exception as e:
        logger.exception("Unexpected failure")
        print(f"Fatal error: {e}")
        return EXIT_FATAL


if __name__ == "__main__":
    sys.exit(main())
