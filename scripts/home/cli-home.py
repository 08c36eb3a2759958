#!/usr/bin/env python3
"""Thin entrypoint for the CLI Home menu."""

from __future__ import annotations

from home_core.app import main


if __name__ == "__main__":
    raise SystemExit(main())
