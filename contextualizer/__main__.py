#!/usr/bin/env python3

"""
Entry point for ``python -m contextualizer``.

Author: Marc Rivero | @seifreed
"""

from colorama import init

from contextualizer.main import main

if __name__ == "__main__":
    init(autoreset=True)
    main()
