"""
Scaffolding commands for the struts2-scaffold CLI.

This module contains command handlers for:
- Listing the available Struts2 versions and their libraries
- Adding Struts 2 support to a project module
"""

import sys

from struts2scaffold.api import Struts2Scaffold
from struts2scaffold.cli.rich_output import get_rich_output
from struts2scaffold.framework import ScaffoldResult, ScaffoldStatus


def cmd_versions(args, scaffold: Struts2Scaffold) -> None:
    """Handle versions command."""
    from struts2scaffold.cli_entry import _is_machine_readable, _print_json_to_stdout

    versions = scaffold.get_versions()
    if _is_machine_readable(args):
        _print_json_to_stdout(args, [v.to_dict() for v in versions])
        return

    output = get_rich_output()
    if getattr(args, "libraries", False):
        tree = output.create_tree(scaffold.provider.title)
        for version in versions:
            node = output.add_tree_node(tree, f"{version.version_name} ({version.id})")
            for library in version.libraries:
                output.add_tree_node(node, f"{library.jar_name}  {library.download_url}")
        output.print_tree(tree)
        return

    table = output.create_table("Struts 2 versions", ["Version", "Id", "Libraries"])
    for version in versions:
        output.add_table_row(table, version.version_name, version.id, len(version.libraries))
    output.print_table(table)


def format_scaffold_result(result: ScaffoldResult) -> str:
    """Format a scaffold result for display."""
    lines = [f"Module: {result.module_name}", f"Version: {result.version_name}"]

    if result.status is ScaffoldStatus.SUCCESS:
        lines.append(f"Created: {result.created_file}")
        lines.append(f"File set: {result.file_set_id}")
        lines.append(f"Filter class: {result.filter_class}")
    elif result.status is ScaffoldStatus.SKIPPED:
        lines.append(f"Nothing to do ({result.skip_reason})")
    else:
        lines.append(f"Error: {result.error}")
        if result.rolled_back_steps:
            lines.append(f"Rolled back: {', '.join(result.rolled_back_steps)}")
        if result.status is ScaffoldStatus.PARTIAL_FAILURE:
            lines.append(f"Left in place: {', '.join(result.completed_steps)}")

    return "\n".join(lines)


def cmd_add_framework(args, scaffold: Struts2Scaffold) -> None:
    """Handle add-framework command."""
    from struts2scaffold.cli_entry import _is_machine_readable, _print_json_to_stdout

    result = scaffold.add_framework(
        args.project, getattr(args, "framework_version", None), getattr(args, "module", None)
    )

    if _is_machine_readable(args):
        _print_json_to_stdout(args, result.to_dict())
    else:
        output = get_rich_output()
        text = format_scaffold_result(result)
        if result.status is ScaffoldStatus.SUCCESS:
            output.print_success("Struts 2 support added")
        elif result.status is ScaffoldStatus.SKIPPED:
            output.print_warning("Struts 2 support not added")
        else:
            output.print_error("Struts 2 setup failed")
        output.console.print(text)

    if getattr(args, "open_settings", False) and result.notification is not None:
        result.notification.activate()

    if not result.success:
        sys.exit(1)
