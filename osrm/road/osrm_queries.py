# osrm/road/osrm_queries.py
# -*- coding: utf-8 -*-
"""
Per-service query assemblers.

Each function checks the service's own preconditions (failing with
ValidationError before any I/O) and returns the operation suffix, a string
of "&key=value" fragments appended after generate_hints/bearings/hints.

API reference: http://project-osrm.org/docs/v5.7.0/api/
"""

from __future__ import annotations

from typing import Sequence

from osrm.core.errors import ValidationError
from osrm.road.osrm_common import bool_token

GEOMETRIES = ("polyline", "polyline6", "geojson")

MAX_NEAREST_NUMBER = 255

# As of 2018 the public server rejected anything but annotations=true.
_ANNOTATIONS = "&annotations=true"


# ────────────────────────────────────────────────────────────────────────────────
# Shared checks
# ────────────────────────────────────────────────────────────────────────────────

def _require_min_coordinates(coordinates: Sequence, minimum: int = 2) -> None:
    if len(coordinates) < minimum:
        raise ValidationError(
            f"Not enough input coordinates given, minimum number of coordinates is {minimum}"
        )


def _require_geometries(geometries: str) -> str:
    value = getattr(geometries, "value", geometries)
    if value not in GEOMETRIES:
        raise ValidationError(f"Geometries must be one of {','.join(GEOMETRIES)}, got {geometries!r}")
    return value


def _overview(overview: bool) -> str:
    return "&overview=full" if overview else "&overview=false"


def _indices(name: str, values: Sequence[int], size: int) -> str:
    """`all` for an empty selection, otherwise the indices joined by ';'."""
    if not values:
        return f"&{name}=all"
    for i in values:
        if isinstance(i, bool) or not isinstance(i, int):
            raise ValidationError(f"{name} indices must be integers, got {i!r}")
        if not 0 <= i < size:
            raise ValidationError(f"{name} index {i} is out of range for {size} coordinates")
    return f"&{name}=" + ";".join(str(i) for i in values)


# ────────────────────────────────────────────────────────────────────────────────
# Services
# ────────────────────────────────────────────────────────────────────────────────

def nearest_args(
      number: int
    , coordinates: Sequence
) -> str:
    """http://project-osrm.org/docs/v5.7.0/api/#nearest-service"""
    if isinstance(number, bool) or not isinstance(number, int) or not 1 < number <= MAX_NEAREST_NUMBER:
        raise ValidationError(f"Number argument must be an integer > 1 (2~{MAX_NEAREST_NUMBER}), got {number!r}")
    if len(coordinates) != 1:
        raise ValidationError("Exactly one Coordinate pair must be provided")
    return f"&number={number}"


def route_args(
      coordinates: Sequence
    , *
    , alternatives: bool = False
    , steps: bool = False
    , continue_straight: bool = False
    , geometries: str = "geojson"
    , overview: bool = True
) -> str:
    """http://project-osrm.org/docs/v5.7.0/api/#route-service"""
    geometries = _require_geometries(geometries)
    _require_min_coordinates(coordinates)
    return (
          "&alternatives=" + bool_token(alternatives)
        + "&steps=" + bool_token(steps)
        + _ANNOTATIONS
        + "&continue_straight=" + bool_token(continue_straight)
        + "&geometries=" + geometries
        + _overview(overview)
    )


def table_args(
      coordinates: Sequence
    , *
    , sources: Sequence[int] = ()
    , destinations: Sequence[int] = ()
) -> str:
    """http://project-osrm.org/docs/v5.7.0/api/#table-service"""
    _require_min_coordinates(coordinates)
    n = len(coordinates)
    return _indices("sources", sources, n) + _indices("destinations", destinations, n)


def match_args(
      coordinates: Sequence
    , *
    , steps: bool = False
    , geometries: str = "geojson"
    , overview: bool = True
    , timestamps: Sequence[int] = ()
    , gaps: bool = True
    , tidy: bool = False
) -> str:
    """http://project-osrm.org/docs/v5.7.0/api/#match-service"""
    _require_min_coordinates(coordinates)
    geometries = _require_geometries(geometries)

    stamps = ""
    if timestamps:
        if len(timestamps) != len(coordinates):
            raise ValidationError(
                f"Timestamps must have one entry per coordinate ({len(timestamps)} != {len(coordinates)})"
            )
        previous = None
        for t in timestamps:
            if isinstance(t, bool) or not isinstance(t, int) or t < 0:
                raise ValidationError(f"Timestamps must be non-negative integers, got {t!r}")
            if previous is not None and t < previous:
                raise ValidationError("Timestamps must be non-decreasing")
            previous = t
        stamps = "&timestamps=" + ";".join(str(t) for t in timestamps)

    return (
          "&steps=" + bool_token(steps)
        + _ANNOTATIONS
        + "&geometries=" + geometries
        + _overview(overview)
        + stamps
        + ("&gaps=split" if gaps else "&gaps=ignore")
        + "&tidy=" + bool_token(tidy)
    )


def trip_args(
      coordinates: Sequence
    , *
    , roundtrip: bool = True
    , source: bool = True
    , destination: bool = True
    , steps: bool = False
    , geometries: str = "geojson"
    , overview: bool = True
) -> str:
    """http://project-osrm.org/docs/v5.7.0/api/#trip-service"""
    _require_min_coordinates(coordinates)
    geometries = _require_geometries(geometries)
    return (
          "&steps=" + bool_token(steps)
        + _ANNOTATIONS
        + "&geometries=" + geometries
        + _overview(overview)
        + "&roundtrip=" + bool_token(roundtrip)
        + ("&source=any" if source else "&source=first")
        + ("&destination=any" if destination else "&destination=first")
    )


