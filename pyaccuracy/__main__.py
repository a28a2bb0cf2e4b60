import sys

from pyaccuracy.cli import main

sys.exit(main())
