import email.utils as eut
import logging
import random
import time
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Mapping, Optional

import requests
from requests import RequestException

from .errors import TransportError
from .utils import logger_setup, redact_api_key

RETRY_STATUSES = (429, 500, 502, 503, 504)


@dataclass(frozen=True)
class TransportResponse:
    status_code: int
    text: str
    url: str
    headers: Mapping[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


class RequestsTransport:
    """
    Fetches fully-built URLs with a ``requests.Session``.

    Every HTTP status comes back as a TransportResponse; only network
    failures raise. With ``max_tries > 1`` the transport also retries
    429/5xx answers and network errors using full-jitter backoff and
    honours ``Retry-After``. The default is a single attempt.
    """

    def __init__(
        self,
        timeout: int = 60,
        min_interval: float = 0.0,  # politeness throttle
        max_tries: int = 1,
        backoff_base: float = 0.75,
        backoff_cap: float = 60.0,
        session: Optional[requests.Session] = None,
        log_level: int = logging.INFO,
    ):
        if max_tries < 1:
            raise ValueError(f"max_tries must be at least 1. Got {max_tries}.")
        self.timeout = timeout
        self.min_interval = float(min_interval)
        self.max_tries = int(max_tries)
        self.backoff_base = float(backoff_base)
        self.backoff_cap = float(backoff_cap)
        self.session = session or requests.Session()
        self.session.headers.update({"Accept": "application/json"})
        self.logger = logger_setup(logger_name="congressgov_client.transport", log_level=log_level)
        self._last_call = 0.0

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

    def close(self) -> None:
        self.session.close()

    # ------------- throttling -------------
    def _gate(self) -> None:
        if self.min_interval <= 0.0:
            return
        now_m = time.monotonic()
        wait = self.min_interval - (now_m - self._last_call)
        if wait > 0:
            time.sleep(wait)
            now_m = time.monotonic()
        self._last_call = now_m

    # ------------- backoff helpers -------------
    @staticmethod
    def _parse_retry_after(value: str) -> float:
        """Return seconds to sleep from a Retry-After header (seconds or HTTP-date)."""
        if not value:
            return 0.0
        try:
            return max(0.0, float(value))
        except ValueError:
            pass
        try:
            dt = eut.parsedate_to_datetime(value)
        except (TypeError, ValueError):
            return 0.0
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=timezone.utc)
        return max(0.0, (dt - datetime.now(timezone.utc)).total_seconds())

    def _sleep_backoff(self, attempt: int) -> None:
        # Full jitter: sleep in [0, min(cap, base * 2**attempt)]
        upper = min(self.backoff_cap, self.backoff_base * (2 ** attempt))
        sleep_time = random.uniform(0, upper)
        self.logger.info(f"Backoff: sleeping for {sleep_time:.2f} seconds on attempt {attempt+1} (max {self.max_tries})")
        time.sleep(sleep_time)

    # ------------- request -------------
    def get(self, url: str) -> TransportResponse:
        """GET ``url`` and return its status, body and headers."""
        safe_url = redact_api_key(url)
        last_exc: Optional[Exception] = None

        for attempt in range(self.max_tries):
            final = attempt == self.max_tries - 1
            try:
                self._gate()
                resp = self.session.get(url, timeout=self.timeout)
            except RequestException as e:
                last_exc = e
                self.logger.warning(f"Request error on attempt {attempt+1}/{self.max_tries}: {type(e).__name__}: {redact_api_key(str(e))}")
                if not final:
                    self._sleep_backoff(attempt)
                continue

            if resp.status_code in RETRY_STATUSES and not final:
                self.logger.warning(f"API request to {safe_url} failed with status {resp.status_code}: {resp.text[:200]}")
                ra = self._parse_retry_after(resp.headers.get("Retry-After", ""))
                if ra > 0:
                    self.logger.info(f"Sleeping for {ra:.2f} seconds.")
                    time.sleep(min(ra, self.backoff_cap))
                else:
                    self._sleep_backoff(attempt)
                continue
            return TransportResponse(resp.status_code, resp.text, url, dict(resp.headers))

        # only reached when the last attempt raised
        raise TransportError(
            f"{type(last_exc).__name__}: {redact_api_key(str(last_exc))}", url=safe_url
        ) from last_exc
