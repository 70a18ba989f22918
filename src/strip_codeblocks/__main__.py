import sys

from strip_codeblocks.cli import main

sys.exit(main())
