#!/usr/bin/env python3
"""
imgview - Entry point.

A keyboard driven, config-driven image viewer core.
"""

from imgview.cli import main

if __name__ == "__main__":
    main()
