"""Allow ``python -m projo``."""

from projo.cli import main

raise SystemExit(main())
