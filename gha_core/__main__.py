import sys

from gha_core.cli import main

sys.exit(main())
