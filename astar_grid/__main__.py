"""Allow ``python -m astar_grid``."""

from .main import main

raise SystemExit(main())
