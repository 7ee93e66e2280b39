"""
Main entry point for running the package as a module.

Usage:
    python -m crf2html ./fam.crf ./textures.html
    python -m crf2html ./textures/ ./textures.html --title "My Textures" --size 256
"""

import sys
from .cli import main

if __name__ == '__main__':
    sys.exit(main())
