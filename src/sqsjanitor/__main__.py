"""Allow ``python -m sqsjanitor``."""

import sys

from sqsjanitor.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
