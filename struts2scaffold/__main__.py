"""Entry point for running struts2scaffold as a module."""

from struts2scaffold.main import main

if __name__ == "__main__":
    raise SystemExit(main())
