import sys

from excel2sql.cli.cli import main

sys.exit(main())
