"""Allow running the CLI with ``python -m patternkit``."""
import sys

from patternkit.cli.main import main

sys.exit(main())
