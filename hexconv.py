#!/usr/bin/env python3
"""
hexstream - Launcher

Runs the hexstream command line from a source checkout.

Usage:
    python hexconv.py [-d] [-w WIDTH] < infile > outfile
"""

from hexstream.cli import main

if __name__ == "__main__":
    main()
