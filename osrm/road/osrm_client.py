# osrm/road/osrm_client.py
# -*- coding: utf-8 -*-
"""
Concrete OSRM HTTP clients:
- OSRMClient: blocking, on top of requests
- AsyncOSRMClient: asyncio, on top of aiohttp

Both compose ServicesMixin, so validation and request building are shared;
they only differ in `_execute`, which turns one OSRMRequest into a parsed
document.

Notes
-----
• The service is anonymous: fixed headers only, no API key.
• Each call opens its own session from the immutable ClientConfig and closes
  it afterwards. There is no pool, no retry and no cache.
• HTTP status codes are not errors here. The service answers 4xx with a JSON
  `{"code": ..., "message": ...}` document and that document is returned.
• Entry points should call init_logging(); this module only fetches the logger.
"""

from __future__ import annotations

import asyncio
import time as _time
from typing import Any as _Any, Dict as _Dict, Optional as _Optional

import aiohttp
import requests as _req
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from osrm.core.config import ClientConfig, ProxyConfig, get_default_config
from osrm.core.types import ResponseDocument
from osrm.infra.logging import get_logger
from .osrm_common import (
      OSRMRequest
    , TransportError
    , decode_body
)
from .osrm_mixins import ServicesMixin

_log = get_logger(__name__)


def _resolve_config(
    cfg: _Optional[ClientConfig],
    timeout: _Optional[int],
    proxy: _Optional[_Any],
) -> ClientConfig:
    """
    Prefer an explicit ClientConfig; `timeout=` / `proxy=` are shortcuts that
    build one on top of the defaults.
    """
    if cfg is not None:
        if timeout is not None or proxy is not None:
            raise TypeError("Pass either cfg= or timeout=/proxy=, not both")
        return cfg
    if timeout is None and proxy is None:
        return get_default_config()
    base = get_default_config()
    return ClientConfig(
          timeout=base.timeout if timeout is None else timeout
        , proxy=proxy
        , base_url=base.base_url
        , api_version=base.api_version
    )


def _log_reply(request: OSRMRequest, status: int, t0: float, size_b: int) -> None:
    _log.info(
        "HTTP GET %s — %s (%.0f ms, %s B)",
          request.service
        , status
        , (_time.time() - t0) * 1000.0
        , size_b
    )


# ────────────────────────────────────────────────────────────────────────────────
# Blocking client
# ────────────────────────────────────────────────────────────────────────────────

class OSRMClient(ServicesMixin):
    """
    Blocking OSRM client.

    Constructor:
      - Prefer: OSRMClient(cfg=ClientConfig(timeout=9))
      - Also ok: OSRMClient(timeout=9, proxy="http://proxy:3128")

    Holds no connections between calls, so there is nothing to close.
    """

    def __init__(
        self,
        cfg: ClientConfig | None = None,
        *,
        timeout: int | None = None,
        proxy: ProxyConfig | str | None = None,
    ):
        self.cfg = _resolve_config(cfg, timeout, proxy)
        _log.debug(
            "OSRMClient ready base=%s version=%s timeout=%s proxy=%s",
              self.cfg.base_url
            , self.cfg.api_version
            , self.cfg.timeout_s
            , self.cfg.proxy
        )

    # ────────────────────────────────────────────────────────────────────────
    # Lifecycle helpers
    # ────────────────────────────────────────────────────────────────────────
    @classmethod
    def from_env(cls) -> "OSRMClient":
        """Convenience ctor that reads OSRM_* variables."""
        return cls(cfg=ClientConfig.from_env())

    # ────────────────────────────────────────────────────────────────────────
    # Core HTTP layer (used by ServicesMixin)
    # ────────────────────────────────────────────────────────────────────────
    def _new_session(self) -> _req.Session:
        sess = _req.Session()
        adapter = HTTPAdapter(max_retries=Retry(total=0, raise_on_status=False))
        sess.mount("https://", adapter)
        sess.mount("http://", adapter)
        return sess

    def _execute(self, request: OSRMRequest) -> ResponseDocument:
        """
        Issue one GET and decode the body:
          1) fresh session with fixed headers
          2) timeout + proxy from the request
          3) map requests exceptions → TransportError
          4) decode JSON (ParseError on garbage)
        """
        proxies: _Optional[_Dict[str, str]] = (
            request.proxy.requests_proxies() if request.proxy is not None else None
        )
        t0 = _time.time()
        try:
            with self._new_session() as sess:
                sess.headers.update(request.headers)
                resp = sess.get(
                      request.url
                    , timeout=request.timeout
                    , proxies=proxies
                )
        except _req.Timeout as e:
            _log.warning(
                "HTTP GET %s — timeout after %.0f ms (timeout=%ss)",
                  request.service
                , (_time.time() - t0) * 1000.0
                , request.timeout
            )
            raise TransportError(f"Timed out calling {request.service}: {e}", url=request.url) from e
        except _req.RequestException as e:
            _log.error(
                "HTTP GET %s — request exception %s after %.0f ms",
                  request.service
                , type(e).__name__
                , (_time.time() - t0) * 1000.0
            )
            raise TransportError(f"{type(e).__name__} calling {request.service}: {e}", url=request.url) from e

        body = resp.content or b""
        _log_reply(request, resp.status_code, t0, len(body))
        return decode_body(body, url=request.url, status=resp.status_code)


# ────────────────────────────────────────────────────────────────────────────────
# asyncio client
# ────────────────────────────────────────────────────────────────────────────────

class AsyncOSRMClient(ServicesMixin):
    """
    asyncio OSRM client. Same constructor and services as OSRMClient; every
    service returns a coroutine.

        osrm = AsyncOSRMClient(timeout=9)
        doc = await osrm.route(Profile.BIKE, [a, b])
    """

    def __init__(
        self,
        cfg: ClientConfig | None = None,
        *,
        timeout: int | None = None,
        proxy: ProxyConfig | str | None = None,
    ):
        self.cfg = _resolve_config(cfg, timeout, proxy)
        _log.debug(
            "AsyncOSRMClient ready base=%s version=%s timeout=%s proxy=%s",
              self.cfg.base_url
            , self.cfg.api_version
            , self.cfg.timeout_s
            , self.cfg.proxy
        )

    @classmethod
    def from_env(cls) -> "AsyncOSRMClient":
        return cls(cfg=ClientConfig.from_env())

    async def _execute(self, request: OSRMRequest) -> ResponseDocument:
        proxy = proxy_auth = None
        if request.proxy is not None:
            proxy = request.proxy.url
            if request.proxy.auth is not None:
                proxy_auth = aiohttp.BasicAuth(*request.proxy.auth)

        t0 = _time.time()
        try:
            async with aiohttp.ClientSession(
                  headers=dict(request.headers)
                , timeout=aiohttp.ClientTimeout(total=request.timeout)
                , skip_auto_headers=("User-Agent",)
            ) as sess:
                async with sess.get(request.url, proxy=proxy, proxy_auth=proxy_auth) as resp:
                    status = resp.status
                    body = await resp.read()
        except asyncio.TimeoutError as e:
            _log.warning(
                "HTTP GET %s — timeout after %.0f ms (timeout=%ss)",
                  request.service
                , (_time.time() - t0) * 1000.0
                , request.timeout
            )
            raise TransportError(f"Timed out calling {request.service}", url=request.url) from e
        except aiohttp.ClientError as e:
            _log.error(
                "HTTP GET %s — request exception %s after %.0f ms",
                  request.service
                , type(e).__name__
                , (_time.time() - t0) * 1000.0
            )
            raise TransportError(f"{type(e).__name__} calling {request.service}: {e}", url=request.url) from e

        body = body or b""
        _log_reply(request, status, t0, len(body))
        return decode_body(body, url=request.url, status=status)


__all__ = ["OSRMClient", "AsyncOSRMClient"]
