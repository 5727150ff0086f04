"""Entry point for running par_cc_statusline as a module."""

from .main import app


def main() -> None:
    """Run the CLI application."""
    app()


if __name__ == "__main__":
    main()
