#!/usr/bin/env python3
"""
quickhttp CLI entry script.

Runs the CLI from a source checkout without installing the package.

Usage:
    python cli.py --help
    python cli.py get http://httpbin.org/get
    python cli.py post http://httpbin.org/post name=alice age:=30
"""

import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).parent
sys.path.insert(0, str(PROJECT_ROOT))

from quickhttp.cli.main import main

if __name__ == "__main__":
    main()
