"""CLI entry point for wireframe-layout.

This module acts as the central entry point for the project's CLI tools.
Commands are implemented in ``wireframe_layout.cli``.
"""

import sys

from wireframe_layout.cli import main

if __name__ == "__main__":
    sys.exit(main())
