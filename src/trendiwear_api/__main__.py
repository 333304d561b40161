"""Module entrypoint for ``python -m trendiwear_api`` CLI usage."""

from trendiwear_api.cli import app as cli_app


def main() -> None:
    cli_app()


if __name__ == "__main__":
    main()
