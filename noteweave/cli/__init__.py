"""noteweave command line interface."""

from ._create_app import _create_app

app = _create_app()


def main() -> None:
    """Console script entry point."""
    app()


__all__ = ["app", "main"]
