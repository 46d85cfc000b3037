"""Allow ``python -m htmlindent``."""

import sys

from htmlindent.cli import main

sys.exit(main())
