"""Entry point for running wttr-cli as a module (python -m wttr_cli)."""

from wttr_cli.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
