"""Allow ``python -m numcmp``."""

import sys

from numcmp.cli import main

if __name__ == "__main__":
    sys.exit(main())
