import sys

from mcq_toolkit.cli import main

sys.exit(main())
