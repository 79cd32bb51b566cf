"""Configuration for uber-earnings.

Endpoint, timeout and page cap come from module constants with environment
overrides. Timeout and page cap are read when an export starts, so a bad
value is reported as a configuration error. The session cookie comes from a
session file.

Session file:
    Create ``~/.uber_earnings_session`` (or ``uber_earnings_session`` in your
    config directory) containing the cookies copied from your browser, one per
    line::

        sid=YOUR_SID
        csid=YOUR_CSID

Environment (optional):
    UBER_EARNINGS_URL=https://...       # activity feed endpoint
    UBER_EARNINGS_TIMEOUT=60            # seconds
    UBER_EARNINGS_MAX_PAGES=10000       # 0 disables the page cap
"""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass, field
from pathlib import Path

from uber_earnings.exceptions import ConfigError, SessionNotFoundError, SessionReadError

logger = logging.getLogger(__name__)

FEED_URL = os.environ.get(
    "UBER_EARNINGS_URL", "https://drivers.uber.com/earnings/api/getWebActivityFeed"
)

HOME_SESSION_NAME = ".uber_earnings_session"
CONFIG_SESSION_NAME = "uber_earnings_session"


DEFAULT_TIMEOUT = 60.0
DEFAULT_MAX_PAGES = 10_000


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from e


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError as e:
        raise ConfigError(f"{name} must be a number, got {raw!r}") from e


def default_timeout() -> float:
    """Request timeout in seconds: ``UBER_EARNINGS_TIMEOUT`` or 60.

    Raises:
        ConfigError: If the variable is not a positive number.
    """
    timeout = _env_float("UBER_EARNINGS_TIMEOUT", DEFAULT_TIMEOUT)
    if timeout <= 0:
        raise ConfigError(f"UBER_EARNINGS_TIMEOUT must be positive, got {timeout}")
    return timeout


def default_max_pages() -> int:
    """Page cap: ``UBER_EARNINGS_MAX_PAGES`` or 10000. 0 means no cap.

    Raises:
        ConfigError: If the variable is not a non-negative integer.
    """
    max_pages = _env_int("UBER_EARNINGS_MAX_PAGES", DEFAULT_MAX_PAGES)
    if max_pages < 0:
        raise ConfigError(
            f"UBER_EARNINGS_MAX_PAGES must be 0 (no limit) or positive, got {max_pages}"
        )
    return max_pages


def default_config_dir() -> Path | None:
    """Return the per-user configuration directory for this platform.

    Returns:
        ``$XDG_CONFIG_HOME`` or ``~/.config`` on Linux and other Unixes,
        ``~/Library/Application Support`` on macOS, ``%APPDATA%`` on Windows.
        None if it cannot be determined.
    """
    if sys.platform == "win32":
        appdata = os.environ.get("APPDATA")
        return Path(appdata) if appdata else None
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support"
    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg and Path(xdg).is_absolute():
        return Path(xdg)
    return Path.home() / ".config"


def read_session_from_file(path: str | Path) -> str:
    """Read a session file and build the Cookie header value from it.

    Surrounding whitespace is trimmed and the remaining lines are joined with
    ``;``.

    Args:
        path: Path to the session file.

    Returns:
        The session string, attached verbatim to outgoing requests.

    Raises:
        SessionReadError: If the file cannot be read.

    Examples:
        >>> read_session_from_file("~/.uber_earnings_session")  # doctest: +SKIP
        'sid=abc;csid=def'
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SessionReadError(str(path), str(e)) from e
    return ";".join(text.strip().splitlines())


@dataclass
class SessionConfig:
    """Where to look for the session file.

    Attributes:
        session_file: Explicit session file. When set, no lookup happens.
        home_dir: Directory searched for ``.uber_earnings_session``.
        config_dir: Directory searched for ``uber_earnings_session``.
    """

    session_file: Path | None = None
    home_dir: Path | None = field(default_factory=Path.home)
    config_dir: Path | None = field(default_factory=default_config_dir)

    def candidates(self) -> list[Path]:
        """Session file locations in lookup order."""
        if self.session_file is not None:
            return [self.session_file]
        paths = []
        if self.home_dir is not None:
            paths.append(self.home_dir / HOME_SESSION_NAME)
        if self.config_dir is not None:
            paths.append(self.config_dir / CONFIG_SESSION_NAME)
        return paths

    def find_session_file(self) -> Path:
        """Return the session file to use.

        An explicit ``session_file`` is returned as-is (reading it reports
        any problem). Otherwise the home file wins over the config file.

        Raises:
            SessionNotFoundError: If no candidate exists.
        """
        if self.session_file is not None:
            return self.session_file
        candidates = self.candidates()
        for path in candidates:
            if path.exists():
                logger.debug("Using session file %s", path)
                return path
        raise SessionNotFoundError([str(p) for p in candidates])

    def read_session(self) -> str:
        """Locate and read the session string."""
        return read_session_from_file(self.find_session_file())
