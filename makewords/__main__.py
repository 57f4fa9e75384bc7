"""Allow running as: python -m makewords"""

import sys

from .cli import main

sys.exit(main())
