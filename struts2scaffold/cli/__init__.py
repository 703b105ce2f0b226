"""Command-line interface for struts2-scaffold."""
