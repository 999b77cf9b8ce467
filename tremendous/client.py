from __future__ import annotations

import logging
import os
from typing import Any, Dict, Iterable, Mapping, Optional, Type, TypeVar

import requests
from pydantic import BaseModel, ValidationError
from requests.adapters import HTTPAdapter

from .errors import ClientValidationError, DecodeError, TransportError, UnexpectedStatusError

logger = logging.getLogger(__name__)

VERSION = "1.0.0"
USER_AGENT = f"tremendous-python/{VERSION}"

TESTFLIGHT_URL = "https://testflight.tremendous.com/api/v2"
PRODUCTION_URL = "https://api.tremendous.com/api/v2"

_TRUTHY = frozenset({"1", "true", "yes", "on"})

E = TypeVar("E", bound=BaseModel)


class _BaseClient:
    """
    Holds connection details, the HTTP session and the low-level _request().
    Resource services (campaigns, orders, products) call back into it.

        api_key:    Tremendous API key, sent as a bearer token
        production: pick the production endpoint instead of testflight
        session:    optional requests.Session to use; the client never closes it
        timeout:    optional transport timeout in seconds, forwarded to requests
    """
    def __init__(self, api_key: str, *, production: bool = False, session: Optional[requests.Session] = None, timeout: Optional[float] = None, pool_connections: int = 10, pool_maxsize: int = 10,):
        self._api_key = api_key
        self._production = bool(production)
        self._base_url = PRODUCTION_URL if self._production else TESTFLIGHT_URL
        self.timeout = timeout

        self._owns_session = session is None
        if session is None:
            session = requests.Session()
            # No retries: a transient failure surfaces to the caller at once.
            adapter = HTTPAdapter(
                pool_connections=pool_connections,
                pool_maxsize=pool_maxsize,
                max_retries=0,
            )
            session.mount("http://", adapter)
            session.mount("https://", adapter)
        self.session = session

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, **kwargs: Any):
        """Build a client from TREMENDOUS_API_KEY / TREMENDOUS_PRODUCTION."""
        env = os.environ if environ is None else environ
        api_key = (env.get("TREMENDOUS_API_KEY") or "").strip()
        if not api_key:
            raise ClientValidationError("TREMENDOUS_API_KEY is not set", field="TREMENDOUS_API_KEY")
        production = (env.get("TREMENDOUS_PRODUCTION") or "").strip().lower() in _TRUTHY
        return cls(api_key, production=production, **kwargs)

    @property
    def api_key(self) -> str:
        return self._api_key

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def production(self) -> bool:
        return self._production

    def __repr__(self) -> str:
        return f"{type(self).__name__}(base_url={self._base_url!r})"

    def headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
            "Accept": "application/json",
            "User-Agent": USER_AGENT,
        }

    def close(self) -> None:
        if self._owns_session:
            self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def _request(self, method: str, path: str, *, operation: str, envelope: Type[E], expected: Iterable[int] = (200,), params: Optional[Dict[str, str]] = None, json: Optional[Dict[str, Any]] = None,) -> E:
        url = f"{self._base_url}/{path.lstrip('/')}"
        logger.debug("%s %s", method, url)
        try:
            resp = self.session.request(
                method,
                url,
                params=params or None,
                json=json,
                headers=self.headers(),
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            raise TransportError(f"Tremendous API {method} {url} failed: {exc}", cause=exc) from exc

        logger.debug("%s %s -> %s", method, url, resp.status_code)
        if resp.status_code not in tuple(expected):
            logger.warning("Tremendous API %s %s returned %s", method, url, resp.status_code)
            raise UnexpectedStatusError(resp.status_code, resp.text, method, resp.url or url)

        try:
            return envelope.model_validate_json(resp.content)
        except ValidationError as exc:
            raise DecodeError(operation, exc) from exc
