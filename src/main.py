"""Run script.

Why it exists:
- Lets you run the CLI with `python -m main` from inside `src/`.
- Keeps a simple entry point besides the installed `fakeiban` script.
"""

from __future__ import annotations

import sys

# Windows consoles may default to cp1252; the banner uses non-ASCII glyphs.
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8")
    sys.stderr.reconfigure(encoding="utf-8")

from cli.main import run


def main() -> None:
    run()


if __name__ == "__main__":
    main()
