"""
Allow running the package as a module.

This module enables running the package with:
    python -m boundary_classifier

It simply delegates to the main() function from boundary_classifier.py.
"""

import sys

from .boundary_classifier import main

if __name__ == "__main__":
    sys.exit(main())
