"""Package entry point for ``python -m subpar``."""

from subpar.cli import main

if __name__ == "__main__":
    main()
