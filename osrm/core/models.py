# osrm/core/models.py
# -*- coding: utf-8 -*-

"""
Core domain models (pure dataclasses + enums).

    - Coordinate: an immutable (lat, lon) point in decimal degrees
    - Bearing: heading constraint (value, range) for one coordinate
    - Profile: routing mode, rendered as a URL path segment
    - PROFILE_SYNONYMS / profile_from_text: English + Spanish profile names

No HTTP imports here; safe to import from anywhere.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Union

import numpy as np

from osrm.core.errors import ValidationError
from osrm.core.types import BearingPair, CoordinatePair, HasLatLon


COORDINATE_DECIMALS = 6


def format_degrees(value: float) -> str:
    """
    Fixed 6-decimal positional rendering (the service's 1e-6 grid, no exponent).

    >>> format_degrees(13.388860)
    '13.388860'
    """
    return np.format_float_positional(
          float(value)
        , precision=COORDINATE_DECIMALS
        , unique=False
        , fractional=True
        , trim="k"
    )


# ────────────────────────────────────────────────────────────────────────────────
# Coordinate
# ────────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Coordinate:
    """
    A geographic point.

    Attributes
    ----------
    lat : float
        Latitude in decimal degrees, rounded to 6 decimals.
    lon : float
        Longitude in decimal degrees, rounded to 6 decimals.
    """

    lat: float
    lon: float

    def __post_init__(self) -> None:
        try:
            lat = float(self.lat)
            lon = float(self.lon)
        except (TypeError, ValueError) as exc:
            raise ValidationError(f"Coordinate values must be numbers: {self.lat!r}, {self.lon!r}") from exc
        if not (math.isfinite(lat) and math.isfinite(lon)):
            raise ValidationError(f"Coordinate values must be finite: {lat!r}, {lon!r}")
        if not -90.0 <= lat <= 90.0:
            raise ValidationError(f"Latitude must be within [-90, 90], got {lat!r}")
        if not -180.0 <= lon <= 180.0:
            raise ValidationError(f"Longitude must be within [-180, 180], got {lon!r}")
        # stored on the 1e-6 wire grid; +0.0 folds -0.0
        object.__setattr__(self, "lat", round(lat, COORDINATE_DECIMALS) + 0.0)
        object.__setattr__(self, "lon", round(lon, COORDINATE_DECIMALS) + 0.0)

    @classmethod
    def coerce(cls, value: Union["Coordinate", CoordinatePair, HasLatLon]) -> "Coordinate":
        """Accept a Coordinate, a (lat, lon) pair or anything with .lat/.lon."""
        if isinstance(value, cls):
            return value
        if isinstance(value, HasLatLon):
            return cls(value.lat, value.lon)
        try:
            lat, lon = value
        except (TypeError, ValueError) as exc:
            raise ValidationError(f"Expected a Coordinate or a (lat, lon) pair, got {value!r}") from exc
        return cls(lat, lon)

    def encode(self) -> str:
        """Service order: longitude first."""
        return f"{format_degrees(self.lon)},{format_degrees(self.lat)}"


# ────────────────────────────────────────────────────────────────────────────────
# Bearing
# ────────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Bearing:
    """
    Heading constraint attached positionally to a coordinate.

    Attributes
    ----------
    value : int
        Heading in degrees, 0..360.
    range : int
        Allowed deviation in degrees, 0..180.
    """

    value: int
    range: int

    def __post_init__(self) -> None:
        for name, upper in (("value", 360), ("range", 180)):
            v = getattr(self, name)
            if isinstance(v, bool) or not isinstance(v, (int, np.integer)):
                raise ValidationError(f"Bearing {name} must be an integer, got {v!r}")
            if not 0 <= int(v) <= upper:
                raise ValidationError(f"Bearing {name} must be within [0, {upper}], got {v!r}")
            object.__setattr__(self, name, int(v))

    @classmethod
    def coerce(cls, value: Union["Bearing", BearingPair]) -> "Bearing":
        if isinstance(value, cls):
            return value
        try:
            v, r = value
        except (TypeError, ValueError) as exc:
            raise ValidationError(f"Expected a Bearing or a (value, range) pair, got {value!r}") from exc
        return cls(v, r)

    def encode(self) -> str:
        return f"{self.value},{self.range}"


# ────────────────────────────────────────────────────────────────────────────────
# Profile
# ────────────────────────────────────────────────────────────────────────────────

class Profile(str, Enum):
    """Routing profiles exposed by the public OSRM demo server."""

    CAR = "car"
    BIKE = "bike"
    FOOT = "foot"
    DRIVING = "driving"

    def __str__(self) -> str:
        return self.value


PROFILE_SYNONYMS: Dict[str, Profile] = {
    # car
      "car": Profile.CAR
    , "auto": Profile.CAR
    , "automovil": Profile.CAR
    , "coche": Profile.CAR
    , "vehiculo": Profile.CAR
    # bike
    , "bike": Profile.BIKE
    , "bici": Profile.BIKE
    , "bicicleta": Profile.BIKE
    , "bicycle": Profile.BIKE
    # foot
    , "foot": Profile.FOOT
    , "pie": Profile.FOOT
    , "caminando": Profile.FOOT
    , "trotando": Profile.FOOT
    # driving
    , "driving": Profile.DRIVING
    , "manejando": Profile.DRIVING
    , "hybrid": Profile.DRIVING
}
"""Normalized (stripped, lower-case) English/Spanish names → Profile."""


def profile_from_text(
    text: Union[str, Profile]
) -> Profile:
    """
    Resolve a profile name or synonym.

    Raises
    ------
    ValidationError
        If the text is not a known profile name.
    """
    if isinstance(text, Profile):
        return text
    key = str(text).strip().lower()
    try:
        return PROFILE_SYNONYMS[key]
    except KeyError:
        raise ValidationError(f"Unknown profile {key!r}; expected one of {sorted(PROFILE_SYNONYMS)}") from None
