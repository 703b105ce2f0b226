"""
Main entry point for the struts2-scaffold CLI.

This module provides the main() function that serves as the console script
entry point and turns the CLI's exit status into a return code.
"""


def main() -> int:
    """Main CLI entry point."""
    from struts2scaffold.cli_entry import main as cli_main

    try:
        cli_main()
    except SystemExit as e:
        return int(e.code or 0) if not isinstance(e.code, str) else 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
