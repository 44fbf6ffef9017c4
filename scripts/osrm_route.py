#!/usr/bin/env python3
# scripts/osrm_route.py
# -*- coding: utf-8 -*-

"""
Route CLI (thin wrapper around osrm.road.router)
================================================

Same flags as ``python -m osrm.road.router`` / ``osrm-route``:

    python scripts/osrm_route.py --profile=bike \
        --from_lat=52.517037 --from_lon=13.388860 \
        --to_lat=52.529407 --to_lon=13.397634 ""
"""

from __future__ import annotations

# ────────────────────────────────────────────────────────────────────────────────
# Path bootstrap (must be first)
# ────────────────────────────────────────────────────────────────────────────────
from pathlib import Path
import sys

ROOT = Path(__file__).resolve().parents[1]  # repo root (one level above /scripts)
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from osrm.road.router import main as _route_main


def main(
    argv: list[str] | None = None
) -> int:
    """Forward CLI args to osrm.road.router.main and return its exit code."""
    return _route_main(argv)


if __name__ == "__main__":
    raise SystemExit(main())
