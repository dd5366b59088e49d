import sys

from queen_placement.cli import main

sys.exit(main())
