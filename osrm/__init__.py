"""
Open Source Routing Machine client.

No login, no API key: nearest, route, table, match and trip against the
public OSRM service (or any compatible server), blocking or asyncio.
"""

__version__ = "0.1.5"

# ── models / config ─────────────────────────────────────────────────────────────
from .core.config import ClientConfig, ProxyConfig, OSRM_API_URL, OSRM_API_VERSION
from .core.errors import OSRMError, ValidationError, TransportError, ParseError
from .core.models import Bearing, Coordinate, Profile, profile_from_text

# ── clients (public API) ────────────────────────────────────────────────────────
from .road.osrm_client import OSRMClient, AsyncOSRMClient
from .road.osrm_common import encode_bearings, encode_coordinates, is_ok, response_error

__all__ = [
    # config
      "ClientConfig", "ProxyConfig", "OSRM_API_URL", "OSRM_API_VERSION",
    # errors
      "OSRMError", "ValidationError", "TransportError", "ParseError",
    # models
      "Bearing", "Coordinate", "Profile", "profile_from_text",
    # clients
      "OSRMClient", "AsyncOSRMClient",
      "encode_bearings", "encode_coordinates", "is_ok", "response_error",
]
