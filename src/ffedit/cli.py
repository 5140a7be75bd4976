"""Command-line interface entry point."""

import sys

from cyclopts import App

from .backend import ffedit
from .tools.helpers import ensure_log_file_handler

app = App(name="ffedit", help="Streamline video edits from the command line.")
app.default(ffedit)


def main(argv: list[str] | None = None) -> int:
    """Run the ffedit CLI."""
    argv = sys.argv[1:] if argv is None else argv
    ensure_log_file_handler()
    return app(argv)


if __name__ == "__main__":
    raise SystemExit(main())
