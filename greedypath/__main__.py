"""Module entrypoint for ``python -m greedypath``."""

from greedypath.cli import main

if __name__ == "__main__":
    main()
