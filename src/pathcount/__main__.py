import sys

from pathcount.cli import main

sys.exit(main())
