"""
Run with: python -m algebrapad
"""
import sys

from algebrapad.app.main import main

if __name__ == "__main__":
    sys.exit(main())
