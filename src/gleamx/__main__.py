"""Allow ``python -m gleamx``."""

import sys

from gleamx.cli import main

sys.exit(main())
