#!/usr/bin/env python3
"""
tfselect - Main entry point.

Runs the command line interface.
"""

from tfselect.cli import main


if __name__ == "__main__":
    main()
