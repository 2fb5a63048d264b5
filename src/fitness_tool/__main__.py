"""Punto de entrada: ``python -m fitness_tool``."""

from __future__ import annotations

from fitness_tool.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
