"""Entry point for `python -m clihelpers`."""

import sys

from .main import main

sys.exit(main())
