"""Entry point for ``python -m wfs``."""

import sys

from wfs.cli import main

if __name__ == "__main__":
    sys.exit(main())
