"""Entrypoint for `python -m tuneview`."""

from .cli import main


if __name__ == "__main__":
    main()
