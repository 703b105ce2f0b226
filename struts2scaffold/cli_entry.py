"""
Command-line interface for struts2-scaffold

Adds Struts 2 support to Java web projects on disk and manages the resulting
facet configuration, with rich terminal output or machine-readable JSON.
"""

import argparse
import json
import logging
import sys
from typing import Any, TextIO

from struts2scaffold import __version__
from struts2scaffold.api import Struts2Scaffold
from struts2scaffold.cli.commands import (
    cmd_add_framework,
    cmd_config,
    cmd_facet,
    cmd_fileset,
    cmd_versions,
    show_facet_settings,
)
from struts2scaffold.cli.rich_output import get_rich_output, set_rich_enabled
from struts2scaffold.config import load_config
from struts2scaffold.framework.versions import known_version_names
from struts2scaffold.notifications import LoggingNotificationSink, RichNotificationSink


# =============================================================================

def _is_machine_readable(args: Any) -> bool:
    return bool(getattr(args, "machine_readable", False))


def _json_stdout(args: Any) -> TextIO:
    """
    When --machine-readable is enabled, main() redirects sys.stdout -> sys.stderr
    to prevent accidental non-JSON output. This function returns the original stdout.
    """
    return getattr(args, "_json_stdout", sys.__stdout__)


def _print_json_to_stdout(args: Any, payload: Any) -> None:
    """
    Always print JSON to the original stdout in machine-readable mode.
    """
    s = json.dumps(payload, indent=2, ensure_ascii=False, default=str)
    print(s, file=_json_stdout(args))


def setup_logging(verbose: bool = False) -> None:
    """Setup logging configuration."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the main argument parser."""
    parser = argparse.ArgumentParser(
        prog="struts2scaffold",
        description="struts2-scaffold - Add Struts 2 support to Java web projects",
        epilog='Use "struts2scaffold <command> --help" for detailed command help.',
    )

    # Global options
    parser.add_argument("--config", "-c", type=str, help="Path to configuration file")

    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose output and debug logging",
    )

    parser.add_argument(
        "--no-rich",
        action="store_true",
        help="Disable rich terminal output (use plain text)",
    )

    parser.add_argument(
        "--machine-readable",
        action="store_true",
        help="Output in machine-readable format (JSON)",
    )

    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Versions command
    versions_parser = subparsers.add_parser("versions", help="List available Struts 2 versions")
    versions_parser.add_argument(
        "--libraries", action="store_true", help="Show the libraries of each version"
    )

    # Add-framework command
    add_parser = subparsers.add_parser(
        "add-framework", help="Add Struts 2 support to a project module"
    )
    add_parser.add_argument("project", help="Path to the project directory")
    add_parser.add_argument(
        "--framework-version",
        choices=known_version_names(),
        help="Struts 2 version (default: from configuration)",
    )
    add_parser.add_argument("--module", help="Module to set up (default: first module)")
    add_parser.add_argument(
        "--open-settings",
        action="store_true",
        help="Show the facet settings once Struts 2 support has been added",
    )

    # Facet command
    facet_parser = subparsers.add_parser("facet", help="Struts 2 facet settings")
    facet_subparsers = facet_parser.add_subparsers(dest="facet_action", required=True)
    facet_show_parser = facet_subparsers.add_parser("show", help="Show facet settings")
    facet_show_parser.add_argument("project", help="Path to the project directory")
    facet_show_parser.add_argument("--module", help="Module (default: first module)")

    # Fileset command
    fileset_parser = subparsers.add_parser("fileset", help="Manage Struts 2 file sets")
    fileset_subparsers = fileset_parser.add_subparsers(dest="fileset_action", required=True)
    fileset_add_parser = fileset_subparsers.add_parser(
        "add", help="Add a configuration file to a file set"
    )
    fileset_add_parser.add_argument("project", help="Path to the project directory")
    fileset_add_parser.add_argument("file", help="Configuration file, relative to the module")
    fileset_add_parser.add_argument("--fileset", help="File set id (default: first file set)")
    fileset_add_parser.add_argument("--module", help="Module (default: first module)")

    # Config command
    config_parser = subparsers.add_parser("config", help="Configuration management")
    config_subparsers = config_parser.add_subparsers(dest="config_action", required=True)
    config_subparsers.add_parser("show", help="Show current configuration")

    config_init_parser = config_subparsers.add_parser("init", help="Create a configuration file")
    config_init_parser.add_argument(
        "--path", default="struts2scaffold.json", help="Configuration file path"
    )
    config_init_parser.add_argument(
        "--format", choices=["json", "yaml"], default="json", help="Configuration file format"
    )

    config_validate_parser = config_subparsers.add_parser(
        "validate", help="Validate a configuration file"
    )
    config_validate_parser.add_argument("config_file", help="Configuration file to validate")

    return parser


def main() -> None:
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        return

    # If machine-readable: ensure stdout is JSON-only.
    if _is_machine_readable(args):
        args._json_stdout = sys.stdout
        sys.stdout = sys.stderr

    setup_logging(getattr(args, "verbose", False))

    use_rich = not getattr(args, "no_rich", False) and not _is_machine_readable(args)
    set_rich_enabled(use_rich)

    # Handle config commands that don't need a Struts2Scaffold instance
    if args.command == "config":
        cmd_config(args)
        return

    try:
        config = load_config(getattr(args, "config", None))
        if _is_machine_readable(args):
            sinks = [LoggingNotificationSink()]
        else:
            output = get_rich_output()
            sinks = [RichNotificationSink(output.console, use_rich=output.use_rich)]
        scaffold = Struts2Scaffold(config, sinks, settings_opener=show_facet_settings)

        if args.command == "versions":
            cmd_versions(args, scaffold)
        elif args.command == "add-framework":
            cmd_add_framework(args, scaffold)
        elif args.command == "facet":
            cmd_facet(args, scaffold)
        elif args.command == "fileset":
            cmd_fileset(args, scaffold)

    except KeyboardInterrupt:
        if _is_machine_readable(args):
            _print_json_to_stdout(args, {"success": False, "error": "cancelled_by_user"})
        print("\nOperation cancelled by user", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        if _is_machine_readable(args):
            _print_json_to_stdout(
                args,
                {"success": False, "error": str(e), "command": getattr(args, "command", None)},
            )
        print(f"Error: {e}", file=sys.stderr)
        if getattr(args, "verbose", False):
            import traceback

            traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
