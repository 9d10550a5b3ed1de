"""Allow running as ``python -m droid_patch``."""

import sys

from droid_patch.cli import main

if __name__ == "__main__":
    sys.exit(main())
