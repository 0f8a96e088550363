"""Module entrypoint for ``python -m repoimport``."""

from repoimport.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
