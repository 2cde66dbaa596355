"""Entry point for running icsbuilder as a module.

Usage: python -m icsbuilder build events.json
"""

from icsbuilder.cli import app


def main():
    """Main entry point for the application."""
    app()


if __name__ == "__main__":
    main()
