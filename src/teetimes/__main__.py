"""
Main entry point for the tee times application.
"""

import sys
from teetimes.cli import main

if __name__ == "__main__":
    sys.exit(main())
