"""Entry point for CLI.

Only for calling via `python -m namekit`, prefer installed `namekit` script.
"""

from namekit.cli.main import cli_entry_point

if __name__ == "__main__":
    cli_entry_point()
