"""
Configuration commands for the struts2-scaffold CLI.

This module contains command handlers for configuration management
(show, init, validate).
"""

import sys

from struts2scaffold.config import ConfigurationError, Struts2ScaffoldConfig, load_config


def cmd_config(args) -> None:
    """Handle config command."""
    if args.config_action == "show":
        config = load_config(getattr(args, "config", None))
        print("Current struts2-scaffold Configuration:")
        print(config.get_config_summary())

    elif args.config_action == "init":
        config = Struts2ScaffoldConfig.default()
        config.to_file(args.path, args.format)
        print(f"Default configuration file created at {args.path}")
        print("Edit the file to customize your struts2-scaffold settings.")

    elif args.config_action == "validate":
        try:
            Struts2ScaffoldConfig.load(args.config_file, use_env=False, validate=True)
            print(f"Configuration file {args.config_file} is valid")
        except ConfigurationError as e:
            print(f"Error: Configuration file is invalid: {e}", file=sys.stderr)
            sys.exit(1)
