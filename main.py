"""puppet-strings - entry point.

Usage:
    python main.py generate [PATTERN ...] [--emit-json PATH | --emit-json-stdout]
    python main.py server [ARGS ...]
"""

import sys

from puppet_strings.cli import main

if __name__ == "__main__":
    sys.exit(main())
