import sys

from json_conformance_suite.cli import main

sys.exit(main())
