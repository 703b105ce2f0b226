"""
Rich terminal output utilities for the struts2-scaffold CLI.

Provides panels, tables and trees for versions, scaffold results and facet
settings, with a plain-text mode for --no-rich.
"""

from typing import Any, Dict, List, Optional, Union
import json

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.tree import Tree


class RichOutputManager:
    """Manages rich terminal output with a plain text mode."""

    def __init__(self, use_rich: bool = True):
        """Initialize the output manager."""
        self.use_rich = use_rich
        if use_rich:
            self.console = Console()
        else:
            self.console = Console(color_system=None, highlight=False, markup=False, emoji=False)

    def print_header(self, title: str, subtitle: Optional[str] = None) -> None:
        """Print a formatted header."""
        if self.use_rich:
            if subtitle:
                header_text = f"[bold blue]{title}[/bold blue]\n[dim]{subtitle}[/dim]"
            else:
                header_text = f"[bold blue]{title}[/bold blue]"

            self.console.print(Panel(header_text, border_style="blue", padding=(1, 2)))
        else:
            self.console.print(f"\n=== {title} ===")
            if subtitle:
                self.console.print(f"{subtitle}")
            self.console.print()

    def print_success(self, message: str) -> None:
        """Print a success message."""
        if self.use_rich:
            self.console.print(f"[green]✓[/green] {message}")
        else:
            self.console.print(f"✓ {message}")

    def print_warning(self, message: str) -> None:
        """Print a warning message."""
        if self.use_rich:
            self.console.print(f"[yellow]⚠[/yellow] {message}")
        else:
            self.console.print(f"⚠ {message}")

    def print_error(self, message: str) -> None:
        """Print an error message."""
        if self.use_rich:
            self.console.print(f"[red]✗[/red] {message}")
        else:
            self.console.print(f"✗ {message}")

    def print_info(self, message: str) -> None:
        """Print an info message."""
        if self.use_rich:
            self.console.print(f"[blue]ℹ[/blue] {message}")
        else:
            self.console.print(f"ℹ {message}")

    def create_table(self, title: str, columns: List[str]) -> Union[Table, Dict]:
        """Create a rich table."""
        if self.use_rich:
            table = Table(title=title, show_header=True, header_style="bold blue")
            for column in columns:
                table.add_column(column)
            return table
        return {"title": title, "columns": columns, "rows": []}

    def add_table_row(self, table: Union[Table, Dict], *values) -> None:
        """Add a row to the table."""
        if isinstance(table, Table):
            table.add_row(*[str(v) for v in values])
        else:
            table["rows"].append(values)

    def print_table(self, table: Union[Table, Dict]) -> None:
        """Print the table."""
        if isinstance(table, Table):
            self.console.print(table)
            return

        self.console.print(f"\n{table['title']}")
        self.console.print("-" * len(table["title"]))
        header = " | ".join(table["columns"])
        self.console.print(header)
        self.console.print("-" * len(header))
        for row in table["rows"]:
            self.console.print(" | ".join(str(v) for v in row))
        self.console.print()

    def create_tree(self, title: str) -> Union[Tree, Dict]:
        """Create a tree structure."""
        if self.use_rich:
            return Tree(title)
        return {"label": title, "children": []}

    def add_tree_node(self, parent: Union[Tree, Dict], label: str) -> Union[Tree, Dict]:
        """Add a node below ``parent``."""
        if isinstance(parent, Tree):
            return parent.add(label)
        node = {"label": label, "children": []}
        parent["children"].append(node)
        return node

    def print_tree(self, tree: Union[Tree, Dict]) -> None:
        """Print the tree."""
        if isinstance(tree, Tree):
            self.console.print(tree)
        else:
            self._print_tree_plain(tree, 0)

    def _print_tree_plain(self, node: Dict, indent: int) -> None:
        prefix = "  " * indent
        if indent == 0:
            self.console.print(node["label"])
        else:
            self.console.print(f"{prefix}├── {node['label']}")
        for child in node["children"]:
            self._print_tree_plain(child, indent + 1)

    def print_json(self, data: Any, title: Optional[str] = None) -> None:
        """Print JSON data."""
        if title:
            self.print_info(title)
        if self.use_rich:
            self.console.print_json(json.dumps(data, default=str))
        else:
            self.console.print(json.dumps(data, indent=2, default=str))


rich_output = RichOutputManager()


def set_rich_enabled(enabled: bool) -> None:
    """Enable or disable rich output globally."""
    global rich_output
    rich_output = RichOutputManager(use_rich=enabled)


def get_rich_output() -> RichOutputManager:
    """Get the global rich output manager."""
    return rich_output
