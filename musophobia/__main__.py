"""Module entrypoint for ``python -m musophobia``."""

from .cli import main


if __name__ == "__main__":
    main()
