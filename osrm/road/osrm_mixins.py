# osrm/road/osrm_mixins.py
# -*- coding: utf-8 -*-
"""
The five OSRM services as a reusable mixin.

Expectations for the concrete client class that inherits this mixin:
- Attributes:
    self.cfg                 : ClientConfig (see osrm.core.config)
- Methods:
    self._execute(request)   -> dict          (blocking client)
                             -> Awaitable[dict] (asyncio client)

Every service validates and builds its request synchronously, then hands it
to `_execute`. With the asyncio client the call therefore raises
ValidationError immediately and otherwise returns a coroutine to await.

Names mirror the service's own API and parameter names one-to-one.
"""

from __future__ import annotations

from typing import Any, Sequence, Union

from osrm.core.models import Profile
from osrm.infra.logging import get_logger
from osrm.road.osrm_common import (
      BearingLike
    , CoordinateLike
    , OSRMRequest
    , build_request
)
from osrm.road import osrm_queries as q

_log = get_logger(__name__)

ProfileLike = Union[Profile, str]


class ServicesMixin:
    """nearest / route / table / match / trip."""

    def _execute(self, request: OSRMRequest) -> Any:
        raise NotImplementedError

    def _call(
        self,
        service: str,
        profile: ProfileLike,
        coordinates: Sequence[CoordinateLike],
        args: str,
        generate_hints: bool,
        bearings: Sequence[BearingLike],
        hints: Sequence[str],
    ) -> Any:
        request = build_request(
              self.cfg
            , service
            , profile
            , coordinates
            , args
            , generate_hints=generate_hints
            , bearings=bearings
            , hints=hints
        )
        _log.info("OSRM %s points=%s profile=%s", service, len(coordinates), profile)
        return self._execute(request)

    def nearest(
        self,
        number: int,
        profile: ProfileLike,
        coordinates: Sequence[CoordinateLike],
        generate_hints: bool = True,
        bearings: Sequence[BearingLike] = (),
        hints: Sequence[str] = (),
    ):
        """
        Snap one coordinate to the street network and return the `number`
        nearest matches.

        http://project-osrm.org/docs/v5.7.0/api/#nearest-service
        """
        args = q.nearest_args(number, coordinates)
        return self._call("nearest", profile, coordinates, args, generate_hints, bearings, hints)

    def route(
        self,
        profile: ProfileLike,
        coordinates: Sequence[CoordinateLike],
        alternatives: bool = False,
        steps: bool = False,
        continue_straight: bool = False,
        geometries: str = "geojson",
        overview: bool = True,
        generate_hints: bool = True,
        bearings: Sequence[BearingLike] = (),
        hints: Sequence[str] = (),
    ):
        """
        Fastest route between the coordinates, in the supplied order.

        http://project-osrm.org/docs/v5.7.0/api/#route-service
        """
        args = q.route_args(
              coordinates
            , alternatives=alternatives
            , steps=steps
            , continue_straight=continue_straight
            , geometries=geometries
            , overview=overview
        )
        return self._call("route", profile, coordinates, args, generate_hints, bearings, hints)

    def table(
        self,
        profile: ProfileLike,
        coordinates: Sequence[CoordinateLike],
        sources: Sequence[int] = (),
        destinations: Sequence[int] = (),
        generate_hints: bool = True,
        bearings: Sequence[BearingLike] = (),
        hints: Sequence[str] = (),
    ):
        """
        Duration matrix between all pairs of `sources` and `destinations`
        (indices into `coordinates`; empty means all).

        http://project-osrm.org/docs/v5.7.0/api/#table-service
        """
        args = q.table_args(coordinates, sources=sources, destinations=destinations)
        return self._call("table", profile, coordinates, args, generate_hints, bearings, hints)

    def match(
        self,
        profile: ProfileLike,
        coordinates: Sequence[CoordinateLike],
        steps: bool = False,
        geometries: str = "geojson",
        overview: bool = True,
        timestamps: Sequence[int] = (),
        gaps: bool = True,
        tidy: bool = False,
        generate_hints: bool = True,
        bearings: Sequence[BearingLike] = (),
        hints: Sequence[str] = (),
    ):
        """
        Snap a noisy GPS trace to the road network.

        http://project-osrm.org/docs/v5.7.0/api/#match-service
        """
        args = q.match_args(
              coordinates
            , steps=steps
            , geometries=geometries
            , overview=overview
            , timestamps=timestamps
            , gaps=gaps
            , tidy=tidy
        )
        return self._call("match", profile, coordinates, args, generate_hints, bearings, hints)

    def trip(
        self,
        profile: ProfileLike,
        coordinates: Sequence[CoordinateLike],
        roundtrip: bool = True,
        source: bool = True,
        destination: bool = True,
        steps: bool = False,
        geometries: str = "geojson",
        overview: bool = True,
        generate_hints: bool = True,
        bearings: Sequence[BearingLike] = (),
        hints: Sequence[str] = (),
    ):
        """
        Travelling-salesman style trip over the coordinates.

        http://project-osrm.org/docs/v5.7.0/api/#trip-service
        """
        args = q.trip_args(
              coordinates
            , roundtrip=roundtrip
            , source=source
            , destination=destination
            , steps=steps
            , geometries=geometries
            , overview=overview
        )
        return self._call("trip", profile, coordinates, args, generate_hints, bearings, hints)
