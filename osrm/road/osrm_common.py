# osrm/road/osrm_common.py
# -*- coding: utf-8 -*-
"""
Common pieces for the OSRM client stack:
- Error classes (re-exported from osrm.core.errors)
- Coordinate / bearing encoders (service path syntax)
- Fixed request headers
- OSRMRequest + build_request(): the one pure request builder shared by the
  blocking and the asyncio clients
- Body decoding and helpers to read the service's `code`/`message` convention

This module does not perform HTTP calls; that lives in osrm/road/osrm_client.py.
Keep it side-effect free (no init_logging here).
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Mapping, Optional, Sequence, Union

from osrm.core.config import ClientConfig, ProxyConfig
from osrm.core.errors import OSRMError, ParseError, TransportError, ValidationError
from osrm.core.models import Bearing, Coordinate, Profile, profile_from_text
from osrm.core.types import ResponseDocument
from osrm.infra.logging import get_logger

_log = get_logger(__name__)


# ────────────────────────────────────────────────────────────────────────────────
# Headers
# ────────────────────────────────────────────────────────────────────────────────

JSON_API_MEDIA_TYPE = "application/vnd.api+json"

FIXED_HEADERS: Mapping[str, str] = {
      "User-Agent": ""
    , "dnt": "1"
    , "accept": JSON_API_MEDIA_TYPE
    , "content-type": JSON_API_MEDIA_TYPE
}
"""Sent on every call. Empty User-Agent keeps the client anonymous."""


# ────────────────────────────────────────────────────────────────────────────────
# Small utils
# ────────────────────────────────────────────────────────────────────────────────

def _short(v: Any, maxlen: int = 420) -> str:
    """Safe, concise preview of a Python object. Useful in logs."""
    try:
        s = json.dumps(v, ensure_ascii=False, sort_keys=True)
    except (TypeError, ValueError):
        s = str(v)
    return s if len(s) <= maxlen else (s[:maxlen] + " …")


def bool_token(flag: bool) -> str:
    """Render a boolean the way the service expects it."""
    return "true" if flag else "false"


# ────────────────────────────────────────────────────────────────────────────────
# Encoders
# ────────────────────────────────────────────────────────────────────────────────

CoordinateLike = Union[Coordinate, Sequence[float]]
BearingLike = Union[Bearing, Sequence[int]]


def encode_coordinates(
    coordinates: Iterable[CoordinateLike]
) -> str:
    """
    Encode points as "{lon},{lat};{lon},{lat};..." in sequence order.
    """
    return ";".join(Coordinate.coerce(c).encode() for c in coordinates)


def encode_bearings(
    bearings: Iterable[BearingLike]
) -> str:
    """
    Encode bearings as "{value},{range};{value},{range};...".
    """
    return ";".join(Bearing.coerce(b).encode() for b in bearings)


# ────────────────────────────────────────────────────────────────────────────────
# Request
# ────────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class OSRMRequest:
    """
    Everything an executor needs to issue one GET.

    Built once per call by `build_request()`; both executors consume it
    without further decisions.
    """

    service: str
    url: str
    timeout: Optional[float] = None
    proxy: Optional[ProxyConfig] = None
    headers: Mapping[str, str] = field(default_factory=lambda: dict(FIXED_HEADERS))


def build_url(
      cfg: ClientConfig
    , service: str
    , profile: Union[Profile, str]
    , coordinates: Sequence[CoordinateLike]
    , args: str
    , *
    , generate_hints: bool = True
    , bearings: Sequence[BearingLike] = ()
    , hints: Sequence[str] = ()
) -> str:
    """
    Compose
    <base>/<service>/<version>/<profile>/<coords>.json?generate_hints=<b>[&bearings=..][&hints=..]<args>

    Bearings and hints are sent under their `bearings=` / `hints=` keys on
    purpose: the service does not parse bare encoded lists.
    """
    if not coordinates:
        raise ValidationError("Coordinates must not be an empty sequence")
    if len(args) <= 1:
        raise ValidationError("Operation arguments must not be empty")

    prof = profile_from_text(profile)
    cord = encode_coordinates(coordinates)
    hint = "generate_hints=" + bool_token(generate_hints)
    bear = ("&bearings=" + encode_bearings(bearings)) if bearings else ""
    hnts = ("&hints=" + ";".join(hints)) if hints else ""

    base_url = f"{cfg.base_url}/{service}/{cfg.api_version}/{prof.value}"
    return f"{base_url}/{cord}.json?{hint}{bear}{hnts}{args}"


def build_request(
      cfg: ClientConfig
    , service: str
    , profile: Union[Profile, str]
    , coordinates: Sequence[CoordinateLike]
    , args: str
    , *
    , generate_hints: bool = True
    , bearings: Sequence[BearingLike] = ()
    , hints: Sequence[str] = ()
) -> OSRMRequest:
    """Single request builder used by every service and both executors."""
    url = build_url(
          cfg
        , service
        , profile
        , coordinates
        , args
        , generate_hints=generate_hints
        , bearings=bearings
        , hints=hints
    )
    _log.debug("REQUEST %s url=%s timeout=%s proxy=%s", service, url, cfg.timeout_s, cfg.proxy)
    return OSRMRequest(
          service=service
        , url=url
        , timeout=cfg.timeout_s
        , proxy=cfg.proxy
    )


# ────────────────────────────────────────────────────────────────────────────────
# Response helpers
# ────────────────────────────────────────────────────────────────────────────────

def decode_body(
      body: Union[str, bytes]
    , *
    , url: str
    , status: Optional[int] = None
) -> ResponseDocument:
    """
    Decode a reply body as JSON.

    HTTP status is informative only: service error replies are JSON too and
    are returned as-is.

    Raises
    ------
    ParseError
        If the body is not valid JSON.
    """
    if isinstance(body, bytes):
        body = body.decode("utf-8", errors="replace")
    try:
        return json.loads(body)
    except ValueError as exc:
        preview = (body or "")[:200]
        _log.error("Invalid JSON from %s (status=%s): %s", url, status, preview)
        raise ParseError(
              f"Response body is not valid JSON (status={status})"
            , url=url
            , status=status
            , body_preview=preview
        ) from exc


def is_ok(
    doc: Mapping[str, Any]
) -> bool:
    """True when the service reports `code == "Ok"`."""
    return isinstance(doc, Mapping) and doc.get("code") == "Ok"


def response_error(
    doc: Mapping[str, Any]
) -> Optional[Dict[str, str]]:
    """
    Return {"code", "message"} for a service error reply, None for "Ok".
    """
    if is_ok(doc):
        return None
    if not isinstance(doc, Mapping):
        return {"code": "Unknown", "message": _short(doc, 200)}
    return {
          "code": str(doc.get("code", "Unknown"))
        , "message": str(doc.get("message", ""))
    }


__all__ = [
      "OSRMError", "ValidationError", "TransportError", "ParseError"
    , "FIXED_HEADERS", "JSON_API_MEDIA_TYPE"
    , "encode_coordinates", "encode_bearings", "bool_token"
    , "OSRMRequest", "build_url", "build_request"
    , "decode_body", "is_ok", "response_error"
]
