from __future__ import annotations

import sys

from lcstarter.cli import main

sys.exit(main())
