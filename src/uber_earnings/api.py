"""High-level export API.

Ties the pieces together: paginator → row projection → CSV writer. Rows are
written and flushed page by page, so whatever was fetched before an error
stays in the output.
"""

from __future__ import annotations

import logging
from datetime import date, tzinfo
from typing import TextIO

from uber_earnings.config import DEFAULT_MAX_PAGES
from uber_earnings.export.rows import project_activity
from uber_earnings.export.writer import CsvActivityWriter
from uber_earnings.feed.client import ActivityFeedClient
from uber_earnings.feed.models import DateRange
from uber_earnings.feed.pagination import ActivityFeedPaginator, FeedPost

logger = logging.getLogger(__name__)


def export_activities(
    session: str,
    start_date: date,
    end_date: date,
    output: TextIO,
    *,
    post: FeedPost | None = None,
    max_pages: int | None = DEFAULT_MAX_PAGES,
    tz: tzinfo | None = None,
    timeout: float | None = None,
) -> int:
    """Export the activity feed for a date range as CSV.

    Args:
        session: Cookie string for the feed (see ``SessionConfig``).
        start_date: First day of the range (inclusive).
        end_date: Last day of the range (inclusive).
        output: Open text stream receiving the CSV.
        post: Request executor. Defaults to an ActivityFeedClient built from
            ``session``.
        max_pages: Page cap passed to the paginator. None or 0 disables it.
        tz: Time zone for Date/Time columns. Defaults to local time.
        timeout: Request timeout in seconds for the default client. None reads
            UBER_EARNINGS_TIMEOUT.

    Returns:
        Number of data rows written.

    Raises:
        ServiceFailure: The feed reported a failure. Rows from earlier pages
            are already written and flushed.
        TransportError: Connection failure or non-2xx status.
        DecodeError: Unexpected response shape.
        PaginationLimitError: ``max_pages`` reached.
        ConfigError: ``max_pages`` is negative or the timeout setting is invalid.

    Examples:
        >>> import sys
        >>> from datetime import date
        >>> export_activities(session, date(2024, 1, 1), date(2024, 1, 31), sys.stdout)  # doctest: +SKIP
        42

    """
    date_range = DateRange(start_date, end_date)
    client: ActivityFeedClient | None = None
    if post is None:
        client = ActivityFeedClient.from_cookie(session, timeout=timeout)
        post = client

    try:
        pager = ActivityFeedPaginator(post, date_range, max_pages=max_pages)
        with CsvActivityWriter(output) as writer:
            writer.write_header()
            writer.flush()
            for page in pager.pages():
                for activity in page.activity_list():
                    writer.write_row(project_activity(activity, tz))
                writer.flush()
            logger.info(
                "Exported %d activities from %d pages (%s..%s)",
                writer.rows_written,
                pager.requests_made,
                start_date,
                end_date,
            )
            return writer.rows_written
    finally:
        if client is not None:
            client.close()
