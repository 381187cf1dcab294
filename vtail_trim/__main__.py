import sys

from .analyze import main

sys.exit(main())
