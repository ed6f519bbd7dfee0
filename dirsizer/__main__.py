"""Module entrypoint for ``python -m dirsizer``."""

from .cli import main


if __name__ == "__main__":
    main()
