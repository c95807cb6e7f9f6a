"""Allow running as ``python -m schematics_trigger``."""

import sys

from schematics_trigger.cli import main

if __name__ == "__main__":
    sys.exit(main())
