"""Allow running soltree with ``python -m soltree``."""

import sys

from soltree.cli.main import main

sys.exit(main())
