"""HTTP request executor for the activity feed.

Sends one JSON body to the feed endpoint and returns the raw response body.
No retries: transport errors and non-2xx statuses raise TransportError.
"""

from __future__ import annotations

import logging
from typing import Any

import requests

from uber_earnings.config import FEED_URL, default_timeout
from uber_earnings.exceptions import TransportError

logger = logging.getLogger(__name__)

CSRF_PLACEHOLDER = "x"


def make_session(session_cookie: str, timeout: float | None = None) -> requests.Session:
    """Create a requests Session carrying the feed's credential headers.

    Configures the session with:
    - ``x-csrf-token`` set to a fixed placeholder (the feed only checks presence)
    - ``Cookie`` set to the session string, verbatim
    - Default timeout for all requests

    Args:
        session_cookie: Opaque session string from the session file.
        timeout: Default timeout in seconds for all requests. None reads
            UBER_EARNINGS_TIMEOUT (60 seconds when unset).

    Returns:
        Configured requests.Session object.

    Raises:
        ConfigError: If ``timeout`` is None and UBER_EARNINGS_TIMEOUT is invalid.

    """
    if timeout is None:
        timeout = default_timeout()
    s = requests.Session()
    s.headers.update(
        {
            "x-csrf-token": CSRF_PLACEHOLDER,
            "Cookie": session_cookie,
        }
    )
    # Default timeouts via a wrapper
    orig_request = s.request

    def timed_request(method: str, url: str, **kwargs: Any) -> requests.Response:
        kwargs.setdefault("timeout", timeout)
        return orig_request(method, url, **kwargs)

    s.request = timed_request  # type: ignore[method-assign,assignment]
    return s


def ensure_ok(resp: requests.Response, msg: str) -> None:
    """Raise TransportError unless the response status is 2xx.

    Args:
        resp: HTTP response object to check.
        msg: Error message prefix if response is not successful.

    Raises:
        TransportError: If response status code is not in 200-299 range.

    """
    if not (200 <= resp.status_code < 300):
        raise TransportError(f"{msg}. HTTP {resp.status_code}: {(resp.text or '')[:400]}")


class ActivityFeedClient:
    """Callable request executor: JSON body in, raw JSON bytes out."""

    def __init__(self, session: requests.Session, url: str = FEED_URL) -> None:
        self.session = session
        self.url = url

    @classmethod
    def from_cookie(
        cls, session_cookie: str, url: str = FEED_URL, timeout: float | None = None
    ) -> ActivityFeedClient:
        return cls(make_session(session_cookie, timeout), url)

    def __call__(self, body: dict[str, Any]) -> bytes:
        try:
            r = self.session.post(self.url, json=body)
        except requests.RequestException as e:
            raise TransportError(f"Request to {self.url} failed: {e}") from e
        ensure_ok(r, "Activity feed request failed")
        logger.debug("Feed responded %s (%d bytes)", r.status_code, len(r.content))
        return r.content

    def close(self) -> None:
        self.session.close()
