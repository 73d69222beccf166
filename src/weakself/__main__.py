"""
Run with: python -m weakself
"""
import sys

from weakself.app.main import main

if __name__ == "__main__":
    sys.exit(main())
