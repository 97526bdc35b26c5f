"""Thin wrapper around the CLI for running from a source checkout.

Prefer running:
- `poetry run serialization-benchmark`
"""

from __future__ import annotations

from serialization_benchmark.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
