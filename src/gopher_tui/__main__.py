"""Allow running the browser with ``python -m gopher_tui``."""

import sys

from .cli import main

sys.exit(main())
