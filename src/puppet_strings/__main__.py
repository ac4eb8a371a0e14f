import sys

from puppet_strings.cli import main

sys.exit(main())
