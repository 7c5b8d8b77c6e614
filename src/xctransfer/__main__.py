import sys

from xctransfer.cli import main

sys.exit(main())
