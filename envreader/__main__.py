"""Module entrypoint for ``python -m envreader``.

All argument parsing and runtime setup happen in ``envreader.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
