"""Allow ``python -m ffedit``."""

from .cli import main

raise SystemExit(main())
