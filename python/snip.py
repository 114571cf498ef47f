#!/usr/bin/env python3
"""Entry point for the snip command recorder."""

from __future__ import annotations

from snip import main

if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
