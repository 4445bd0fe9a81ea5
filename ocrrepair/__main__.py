import sys

from ocrrepair.cli import main

sys.exit(main())
