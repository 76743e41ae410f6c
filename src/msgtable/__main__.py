"""``python -m msgtable`` entry point."""

import sys

from msgtable.cli import main

sys.exit(main())
