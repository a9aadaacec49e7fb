"""Entry point for python -m shrekdeck"""

from shrekdeck.cli import cli

if __name__ == "__main__":
    cli()
