"""
Convenience entry point for running sudpen directly.

Usage: python -m sudpen [command] [options]
"""

from sudpen.cli.app import app

if __name__ == "__main__":
    app()
