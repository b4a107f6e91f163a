"""Module entrypoint for ``python -m quickexplorer``.

All argument parsing and session setup happen in ``quickexplorer.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
