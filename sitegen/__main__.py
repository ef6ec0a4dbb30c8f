"""Main entry point for the sitegen CLI."""

from sitegen.cli import cli


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
