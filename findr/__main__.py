"""Module entrypoint for ``python -m findr``.

All argument parsing and search setup happen in ``findr.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
