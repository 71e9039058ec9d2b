from __future__ import annotations

import sys
from adt_dsl.tui import main

if __name__ == "__main__":
    sys.exit(main())
