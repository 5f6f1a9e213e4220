"""Run the Pebble CLI with ``python -m pebble``."""

from pebble.cli.app import app

if __name__ == "__main__":
    app()
