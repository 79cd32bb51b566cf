"""uber-earnings - export Uber driver earnings activities to CSV.

This package pulls the driver earnings activity feed using a session copied
from the browser and streams it out as CSV, one row per activity.

Module Structure:
    uber_earnings.feed: Wire models, HTTP executor and cursor paginator
    uber_earnings.export: Row projection and streaming CSV writer
    uber_earnings.api: export_activities(), the end-to-end pipeline
    uber_earnings.config: Session file lookup and environment settings
    uber_earnings.cli: ``uber-earnings`` command

Quick Start:
    >>> import sys
    >>> from datetime import date
    >>> from uber_earnings import SessionConfig, export_activities
    >>>
    >>> session = SessionConfig().read_session()  # doctest: +SKIP
    >>> export_activities(session, date(2024, 1, 1), date(2024, 1, 31), sys.stdout)  # doctest: +SKIP

Output columns:
    UUID, Type, Date, Time, Title, Total, Url, Tip, Duration, Distance,
    Pickup, DropOff, MapUrl
"""

__version__ = "0.1.0"

from uber_earnings.api import export_activities
from uber_earnings.config import SessionConfig, read_session_from_file
from uber_earnings.exceptions import (
    ConfigError,
    DecodeError,
    EarningsError,
    ExtractionError,
    PaginationLimitError,
    ServiceFailure,
    SessionNotFoundError,
    SessionReadError,
    TransportError,
)

__all__ = [
    "ConfigError",
    "DecodeError",
    "EarningsError",
    "ExtractionError",
    "PaginationLimitError",
    "ServiceFailure",
    "SessionConfig",
    "SessionNotFoundError",
    "SessionReadError",
    "TransportError",
    "__version__",
    "export_activities",
    "read_session_from_file",
]
