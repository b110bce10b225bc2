"""
Package entry point for running the shop menu as a module:

    python -m mechanic_shop <dbname> <port> <user>

The installed `mechanic-shop` console script points at the same function.
"""

from __future__ import annotations

from .shell import main

if __name__ == "__main__":
    raise SystemExit(main())
