"""Entry point for ``python -m lintloop``."""

from lintloop.cli import main

if __name__ == "__main__":
    main()
