import sys

from vectorloop.cli import main

sys.exit(main())
