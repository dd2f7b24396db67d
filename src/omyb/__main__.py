"""Allow ``python -m omyb``."""

import sys

from omyb.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
