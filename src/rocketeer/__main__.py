#!/usr/bin/env python3
"""
Rocketeer - Module Entry Point
------------------------------

This module provides support for running the tool as 'python -m rocketeer'.
"""

import sys

from .main import main

if __name__ == "__main__":
    sys.exit(main())
