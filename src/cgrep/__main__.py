import sys

from cgrep.cli import main

sys.exit(main())
