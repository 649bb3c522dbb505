"""Package entry point for ``python -m winsplit``."""

from winsplit.cli import main

if __name__ == "__main__":
    main()
