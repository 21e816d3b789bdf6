"""src/urivo/__main__.py"""

import sys

from urivo.cli import main

sys.exit(main())
