"""Allow running the CLI with ``python -m justify``."""

import sys

from justify.cli import main


sys.exit(main())
