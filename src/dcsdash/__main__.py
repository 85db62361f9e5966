"""Allow ``python -m dcsdash``."""

import sys

from dcsdash.cli import main

sys.exit(main())
