"""Allow ``python -m chessmachine``."""

import sys

from chessmachine.app import main

sys.exit(main())
