import sys

from asciijack.cli import main

sys.exit(main())
