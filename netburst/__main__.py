#!/usr/bin/env python3
"""
Enable execution of the netburst package as a module.

This allows running the package with: python -m netburst
"""

from .cli.main import main

if __name__ == "__main__":
    main()
