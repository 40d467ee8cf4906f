"""Entry point for ``python -m blockbuilder``."""

import sys

from blockbuilder.cli import main

if __name__ == "__main__":
    sys.exit(main())
