#!/usr/bin/env python3
"""
MyShell launcher for running from a source checkout
"""

import sys
import os

# Add MyShell to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from myshell.cli import main

if __name__ == "__main__":
    sys.exit(main())
