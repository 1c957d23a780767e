"""Module entrypoint for ``python -m walker``.

All argument parsing and runtime setup happen in ``walker.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
