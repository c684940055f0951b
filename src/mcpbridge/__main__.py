import sys

from mcpbridge.cli import main

sys.exit(main())
