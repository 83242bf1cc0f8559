"""Allow running the mirror with ``python -m folder_mirror``."""

import sys

from folder_mirror.main import main

sys.exit(main())
