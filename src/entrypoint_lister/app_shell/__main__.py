import sys

from entrypoint_lister.app_shell.cli import main

sys.exit(main())
