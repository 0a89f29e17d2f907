# drone_nav/__main__.py
# Package entrypoint so you can run:
#   python -m drone_nav --help
# and it will delegate to the CLI.
#
# Examples:
#   python -m drone_nav params.json -e
#   python -m drone_nav params.json --time --json --out result.json

from __future__ import annotations

from .cli import main

if __name__ == "__main__":
    main()
