"""Module entrypoint for ``python -m ghprojects``."""

from ghprojects.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
