#%%
from __future__ import annotations

import logging
from typing import Any, Iterator, Optional, Union
from urllib.parse import parse_qsl, urlencode, urlparse, urlunparse

from .config import load_env, resolve_api_key
from .endpoints import Endpoint
from .errors import ShapeMismatch, TransportError
from .generic import GenericResponse
from .resolution import ShapeRef, materialize
from .response_models import ResponseShape
from .transport import RequestsTransport, TransportResponse
from .url_builders import BASE_URL, generate_url
from .utils import logger_setup, redact_api_key

#%%
Resolved = Union[GenericResponse, ResponseShape]


class CongressAPIClient:
    """
    Typed client for the Congress.gov v3 API.

    Describe what to fetch with an ``Endpoint``, then ``fetch`` it. Without a
    shape you get the loss-free ``GenericResponse``; with one you get the
    materialized dataclass.

        client = CongressAPIClient()
        ep = Endpoint.member_list(MemberListParams().with_limit(10))
        members = client.fetch(ep, MembersResponse)
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: str = BASE_URL,
        transport: Optional[Any] = None,
        timeout: int = 60,
        min_interval: float = 0.0,  # politeness throttle
        max_tries: int = 1,  # >1 opts into transport-level retries
        log_level: int = logging.INFO,
    ):
        # the environment is only consulted when no key is passed in
        self.api_key = resolve_api_key(api_key)
        self.base_url = base_url.rstrip("/")
        self.transport = transport or RequestsTransport(
            timeout=timeout, min_interval=min_interval, max_tries=max_tries, log_level=log_level
        )
        self.logger = logger_setup(logger_name="congressgov_client.client", log_level=log_level)

    @classmethod
    def from_env(cls, env_file: Optional[str] = None, **kwargs) -> "CongressAPIClient":
        """Load a ``.env`` file, then build a client from the environment."""
        load_env(env_file)
        return cls(**kwargs)

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

    def close(self) -> None:
        close = getattr(self.transport, "close", None)
        if close is not None:
            close()

    # ------------- urls -------------
    def build_url(self, endpoint: Endpoint) -> str:
        """Full request URL, api_key included. Raises UrlConstructionError."""
        return generate_url(endpoint, self.api_key, self.base_url)

    def _url_with_key(self, url: Optional[str]) -> Optional[str]:
        """Return URL with api_key added if it's an api.congress.gov link; pass through others/None."""
        if not url:
            return url
        u = urlparse(url)
        if u.netloc != urlparse(self.base_url).netloc:
            # Don't append keys to non-API assets like PDFs on www.congress.gov
            return url
        q = parse_qsl(u.query, keep_blank_values=True)
        if not any(k == "api_key" for k, _ in q):
            q.append(("api_key", self.api_key))
        new_q = urlencode(q, safe=":")
        return urlunparse((u.scheme, u.netloc, u.path, u.params, new_q, u.fragment))

    # ------------- core request helpers -------------
    def _get_structural(self, url: str) -> GenericResponse:
        safe_url = redact_api_key(url)
        self.logger.debug(f"GET {safe_url}")
        resp: TransportResponse = self.transport.get(url)
        if not 200 <= resp.status_code < 300:
            reason = resp.text[:200] if resp.text else "no body"
            self.logger.warning(f"API request to {safe_url} failed with status {resp.status_code}: {reason}")
            raise TransportError(reason, status_code=resp.status_code, url=safe_url)
        return GenericResponse.from_json(resp.text, url=safe_url)

    def _resolve(self, structural: GenericResponse, shape: Optional[ShapeRef], fallback: bool) -> Resolved:
        if shape is None:
            return structural
        try:
            return materialize(structural, shape)
        except ShapeMismatch as e:
            if not fallback:
                raise
            self.logger.warning(f"Falling back to generic response: {e}")
            return structural

    def fetch(self, endpoint: Endpoint, shape: Optional[ShapeRef] = None, *, fallback: bool = False) -> Resolved:
        """
        Fetch one endpoint.

        Args:
            endpoint: what to fetch.
            shape: response shape class (or its name) to materialize into.
                ``None`` returns the structural response.
            fallback: on ShapeMismatch return the structural response
                instead of raising.

        Raises:
            UrlConstructionError, TransportError, MalformedBody, ShapeMismatch
        """
        url = self.build_url(endpoint)
        structural = self._get_structural(url)
        return self._resolve(structural, shape, fallback)

    def fetch_default(self, endpoint: Endpoint, *, fallback: bool = False) -> Resolved:
        """Fetch and materialize into the endpoint's documented shape, if it has one."""
        return self.fetch(endpoint, endpoint.default_shape, fallback=fallback)

    def fetch_url(self, url: str, shape: Optional[ShapeRef] = None, *, fallback: bool = False) -> Resolved:
        """Fetch an absolute API URL, e.g. a ``url`` or ``pagination.next`` link from a body."""
        structural = self._get_structural(self._url_with_key(url))
        return self._resolve(structural, shape, fallback)

    # ------------- pagination -------------
    def iter_pages(
        self,
        endpoint: Endpoint,
        shape: Optional[ShapeRef] = None,
        *,
        max_pages: Optional[int] = None,
    ) -> Iterator[Resolved]:
        """
        Yield one response per page, following ``pagination.next`` links
        until there are none, a link repeats, or ``max_pages`` is reached.
        """
        url = self.build_url(endpoint)
        self.logger.debug(f"Starting pagination for {endpoint.kind.value}")
        seen_urls = set()
        pages = 0

        while url:
            if url in seen_urls:
                self.logger.warning("Detected repeated next url. Stopping pagination.")
                break
            seen_urls.add(url)

            structural = self._get_structural(url)
            pages += 1
            yield self._resolve(structural, shape, fallback=False)

            if max_pages is not None and pages >= max_pages:
                self.logger.info(f"Reached max_pages={max_pages}. Stopping.")
                break

            next_url = structural.get_path("pagination.next")
            if not next_url:
                self.logger.info(f"No next page after {pages} page(s). Stopping.")
                break
            url = self._url_with_key(next_url)
