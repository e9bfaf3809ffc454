#!/usr/bin/env python3
"""
Entry point for running semaver as a module.
"""

import sys

from semaver import main

if __name__ == '__main__':
    sys.exit(main())
