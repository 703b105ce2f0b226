"""
Facet settings commands for the struts2-scaffold CLI.

This module contains command handlers for:
- Showing a module's Struts 2 facet settings (file sets and their files)
- Adding configuration files to file sets
"""

from struts2scaffold.api import Struts2Scaffold
from struts2scaffold.cli.rich_output import get_rich_output
from struts2scaffold.facet import StrutsFacet


def show_facet_settings(facet: StrutsFacet) -> None:
    """Print the facet settings of a module."""
    output = get_rich_output()
    configuration = facet.configuration

    tree = output.create_tree(facet.name)
    if not configuration.file_sets:
        output.add_tree_node(tree, "(no file sets)")
    for file_set in configuration.file_sets:
        label = f"{file_set.name} [{file_set.id}]"
        if file_set.removed:
            label += " (removed)"
        node = output.add_tree_node(tree, label)
        for file in file_set.files:
            output.add_tree_node(node, file)
    output.print_tree(tree)

    if facet.module.web_facet is not None:
        output.print_info(f"web.xml: {facet.module.web_facet.web_xml}")


def cmd_facet(args, scaffold: Struts2Scaffold) -> None:
    """Handle facet command."""
    from struts2scaffold.cli_entry import _is_machine_readable, _print_json_to_stdout

    if args.facet_action == "show":
        facet = scaffold.get_facet(args.project, getattr(args, "module", None))
        if _is_machine_readable(args):
            _print_json_to_stdout(
                args,
                {"module": facet.module.to_dict(), **facet.configuration.to_dict()},
            )
        else:
            show_facet_settings(facet)


def cmd_fileset(args, scaffold: Struts2Scaffold) -> None:
    """Handle fileset command."""
    from struts2scaffold.cli_entry import _is_machine_readable, _print_json_to_stdout

    if args.fileset_action == "add":
        file_set = scaffold.add_config_file(
            args.project,
            args.file,
            getattr(args, "fileset", None),
            getattr(args, "module", None),
        )
        if _is_machine_readable(args):
            _print_json_to_stdout(args, file_set.to_dict())
        else:
            get_rich_output().print_success(f"{args.file} is part of file set '{file_set.name}'")
