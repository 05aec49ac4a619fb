"""Script entry point.

Why it exists:
- Backs the `person-records` console script.
- Allows `python -m main` from inside `src/` during development.
"""

from __future__ import annotations

import sys

# Addresses contain non-ASCII text; Windows consoles default to cp1252.
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8")
    sys.stderr.reconfigure(encoding="utf-8")

from cli.main import run


def main() -> None:
    run()


if __name__ == "__main__":
    main()
