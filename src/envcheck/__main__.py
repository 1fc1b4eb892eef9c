"""Allow ``python -m envcheck``."""

from envcheck.presentation.cli import main

raise SystemExit(main())
