# osrm/core/config.py
# -*- coding: utf-8 -*-

"""
Core configuration: API constants and the immutable client configuration.

Current contents
----------------
- OSRM_API_VERSION / OSRM_API_URL: service coordinates (scheme picked once,
  at import time, from the interpreter's ssl support)
- ProxyConfig: optional HTTP(S) proxy with credentials
- ClientConfig: timeout + proxy + base URL, shared by every call of a client
"""

from __future__ import annotations

import importlib.util
import os
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple
from urllib.parse import quote, urlsplit, urlunsplit

from osrm.core.errors import ValidationError


# ────────────────────────────────────────────────────────────────────────────────
# Service constants
# ────────────────────────────────────────────────────────────────────────────────

OSRM_API_VERSION = "v1"

HAS_SSL = importlib.util.find_spec("ssl") is not None

OSRM_API_URL = (
    "https://router.project-osrm.org"
    if HAS_SSL
    else "http://router.project-osrm.org"
)

MAX_TIMEOUT_S = 255


# ────────────────────────────────────────────────────────────────────────────────
# Proxy
# ────────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class ProxyConfig:
    """
    HTTP(S) proxy descriptor.

    Attributes
    ----------
    url : str
        Proxy URL, e.g. "http://proxy.local:3128". Credentials embedded in the
        URL are split out into `username` / `password`.
    username, password : str | None
        Basic-auth credentials for the proxy.
    """

    url: str
    username: Optional[str] = None
    password: Optional[str] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        parts = urlsplit(str(self.url).strip())
        if parts.scheme not in {"http", "https"} or not parts.hostname:
            raise ValidationError(f"Proxy URL must look like http://host:port, got {self.url!r}")

        username = self.username if self.username is not None else parts.username
        password = self.password if self.password is not None else parts.password

        netloc = f"[{parts.hostname}]" if ":" in parts.hostname else parts.hostname
        if parts.port:
            netloc = f"{netloc}:{parts.port}"
        object.__setattr__(self, "url", urlunsplit((parts.scheme, netloc, "", "", "")))
        object.__setattr__(self, "username", username)
        object.__setattr__(self, "password", password)

    @property
    def auth(self) -> Optional[Tuple[str, str]]:
        if self.username is None:
            return None
        return (self.username, self.password or "")

    def requests_proxies(self) -> Dict[str, str]:
        """`proxies=` mapping for requests (credentials inline)."""
        url = self.url
        if self.auth is not None:
            scheme, rest = url.split("://", 1)
            user, pwd = self.auth
            url = f"{scheme}://{quote(user, safe='')}:{quote(pwd, safe='')}@{rest}"
        return {"http": url, "https": url}


# ────────────────────────────────────────────────────────────────────────────────
# Client configuration
# ────────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class ClientConfig:
    """
    Immutable configuration bundle shared by every call of one client.

    Attributes
    ----------
    timeout : int
        Seconds, 0..255. 0 disables the timeout.
    proxy : ProxyConfig | None
        Optional proxy.
    base_url : str
        Service root (no trailing slash).
    api_version : str
        API version path segment.
    """

    timeout: int = 99
    proxy: Optional[ProxyConfig] = None
    base_url: str = OSRM_API_URL
    api_version: str = OSRM_API_VERSION

    def __post_init__(self) -> None:
        if isinstance(self.timeout, bool) or not isinstance(self.timeout, int):
            raise ValidationError(f"Timeout must be an integer number of seconds, got {self.timeout!r}")
        if not 0 <= self.timeout <= MAX_TIMEOUT_S:
            raise ValidationError(f"Timeout must be within [0, {MAX_TIMEOUT_S}] seconds, got {self.timeout}")
        if isinstance(self.proxy, str):
            object.__setattr__(self, "proxy", ProxyConfig(self.proxy))

        base = str(self.base_url).strip().rstrip("/")
        if urlsplit(base).scheme not in {"http", "https"}:
            raise ValidationError(f"Base URL must be http(s), got {self.base_url!r}")
        object.__setattr__(self, "base_url", base)

        if not self.api_version or "/" in self.api_version:
            raise ValidationError(f"API version must be a single path segment, got {self.api_version!r}")

    @property
    def timeout_s(self) -> Optional[float]:
        """Timeout in seconds for the transport, or None when disabled."""
        return float(self.timeout) if self.timeout > 0 else None

    @classmethod
    def from_env(cls) -> "ClientConfig":
        """
        Build a config from OSRM_TIMEOUT, OSRM_BASE_URL and OSRM_PROXY.
        Unset variables keep the defaults.
        """
        kwargs = {}
        timeout = os.getenv("OSRM_TIMEOUT")
        if timeout:
            try:
                kwargs["timeout"] = int(timeout)
            except ValueError as exc:
                raise ValidationError(f"OSRM_TIMEOUT must be an integer, got {timeout!r}") from exc
        base_url = os.getenv("OSRM_BASE_URL")
        if base_url:
            kwargs["base_url"] = base_url
        proxy = os.getenv("OSRM_PROXY")
        if proxy:
            kwargs["proxy"] = ProxyConfig(proxy)
        return cls(**kwargs)


DEFAULT_CONFIG = ClientConfig()


def get_default_config() -> ClientConfig:
    """
    Return the global default configuration.

    Provided as a function in case this ever needs to become dynamic
    without changing call sites.
    """
    return DEFAULT_CONFIG
