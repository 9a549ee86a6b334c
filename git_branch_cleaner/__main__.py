import sys

from git_branch_cleaner.cli.main import main

sys.exit(main())
