import sys

from brdocs.cli import main

sys.exit(main())
