"""Entry point for ``python -m noteweave``."""

from noteweave.cli import main

if __name__ == "__main__":
    main()
