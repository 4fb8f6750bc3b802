"""Allow ``python -m hl_cli``."""

import sys

from hl_cli.cli import main

sys.exit(main())
