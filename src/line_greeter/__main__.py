"""``python -m line_greeter`` runs the same entry as the installed script."""

from __future__ import annotations

from .entry import main

if __name__ == "__main__":
    raise SystemExit(main())
