"""Run as module: python -m opsml_cli"""

import sys

from opsml_cli.cli.main import main

sys.exit(main())
