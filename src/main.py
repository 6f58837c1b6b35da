"""Run script.

Lets you run the CLI with `python -m main` from inside `src/`, in addition
to the `github-activity` console script.
"""

from __future__ import annotations

import sys

# Workaround for UnicodeEncodeError on Windows terminals/CI (cp1252 vs utf-8):
# event lines contain "•" and "→".
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8")
    sys.stderr.reconfigure(encoding="utf-8")

from cli.main import main as cli_main


def main() -> None:
    cli_main()


if __name__ == "__main__":
    main()
