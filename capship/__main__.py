"""Allow ``python -m capship``."""

import sys

from capship.cli import main

if __name__ == "__main__":
    sys.exit(main())
