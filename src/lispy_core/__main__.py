"""Run the Lispy shell with ``python -m lispy_core``."""

import sys

from .repl import main

sys.exit(main())
