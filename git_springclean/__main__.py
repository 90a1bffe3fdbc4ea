import sys

from git_springclean.cli.main import main

sys.exit(main())
