"""Module entrypoint for ``python -m ccsdd``.

This keeps module-mode execution behavior identical to the console script.
All argument handling and dispatch happen in ``ccsdd.cli``.
"""

import sys

from .cli import main


if __name__ == "__main__":
    sys.exit(main())
