"""Allow ``python -m shoplist``."""
import sys

from shoplist.cli import main

sys.exit(main())
