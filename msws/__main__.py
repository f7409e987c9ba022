"""Allow ``python -m msws``."""

import sys

from msws.cli import main

sys.exit(main())
