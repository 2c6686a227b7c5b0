"""Module entry point for running with python -m summary_generate."""

import sys

from summary_generate.cli import main

if __name__ == "__main__":
    sys.exit(main())
