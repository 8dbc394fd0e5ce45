#!/usr/bin/env python
"""
CommandLine:
    python -m annotstein --help
"""
import sys


if __name__ == '__main__':
    from annotstein.cli.__main__ import main
    sys.exit(main())
