"""Entry point for ``python -m gyatt``."""

from gyatt.cli import main

if __name__ == "__main__":
    main()
