"""Entry point for `python -m daisythemes`."""

from daisythemes.cli import main

if __name__ == "__main__":
    main()
