# osrm/core/types.py
# -*- coding: utf-8 -*-

"""
Shared type aliases and lightweight protocols.

Contents
--------
- ResponseDocument: decoded OSRM reply, schema owned by the service
- CoordinatePair / BearingPair: plain tuples accepted wherever models are
- HasLatLon: Protocol for duck-typed points
"""

from __future__ import annotations

from typing import (
      Any
    , Dict
    , Protocol
    , Tuple
    , runtime_checkable
)


# ────────────────────────────────────────────────────────────────────────────────
# Service replies
# ────────────────────────────────────────────────────────────────────────────────

ResponseDocument = Dict[str, Any]
"""Decoded OSRM reply. Error replies use the same shape (`code`/`message`)."""


# ────────────────────────────────────────────────────────────────────────────────
# Geographic helpers
# ────────────────────────────────────────────────────────────────────────────────

CoordinatePair = Tuple[float, float]
"""Simple (lat, lon) pair in decimal degrees."""

BearingPair = Tuple[int, int]
"""(value, range) in degrees."""


@runtime_checkable
class HasLatLon(Protocol):
    """
    Protocol for objects that expose `lat` and `lon` attributes.

    Lets the encoders accept points from other libraries without depending on
    a specific class.
    """

    lat: float
    lon: float
