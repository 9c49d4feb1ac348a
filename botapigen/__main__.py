import sys

from botapigen.cli import main

sys.exit(main())
