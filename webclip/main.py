"""Main entry point for the web clipping tool."""

from webclip.cli import create_app


def main():
    """Main entry point for the application."""
    app = create_app()
    app()


if __name__ == "__main__":
    main()
