import sys

from wordsim.cli import main

sys.exit(main())
