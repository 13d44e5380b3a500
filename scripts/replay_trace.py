#!/usr/bin/env python
"""Compatibility wrapper for ordcache.cli.replay_trace."""
from pathlib import Path
import sys

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from ordcache.cli.replay_trace import main


if __name__ == '__main__':
    raise SystemExit(main())
