"""Cursor-driven pagination over the activity feed.

The paginator owns the only mutable state in the pipeline: the cursor and the
"more data" flag. Each page is requested only after the caller has consumed
the previous one, so network I/O and output writing never overlap.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from typing import Any

from uber_earnings.config import DEFAULT_MAX_PAGES
from uber_earnings.exceptions import ConfigError, PaginationLimitError, ServiceFailure
from uber_earnings.feed.models import (
    Activity,
    ActivityRequest,
    DateRange,
    FeedFailure,
    FeedSuccess,
    decode_feed_response,
    parse_feed_response,
)

logger = logging.getLogger(__name__)

# Sends one request body, returns the response as raw JSON (bytes/str)
# or as an already-parsed JSON object.
FeedPost = Callable[[dict[str, Any]], Any]


def decode_response(raw: Any) -> FeedSuccess | FeedFailure:
    if isinstance(raw, (bytes, bytearray, str)):
        return decode_feed_response(raw)
    return parse_feed_response(raw)


class ActivityFeedPaginator:
    """Walks the feed page by page for one date range.

    Args:
        post: Request executor (see ``ActivityFeedClient``).
        date_range: Inclusive range sent with every request.
        max_pages: Stop with PaginationLimitError after this many requests if
            the feed still reports more data. None or 0 disables the cap.

    Raises:
        ConfigError: If ``max_pages`` is negative.

    Examples:
        >>> client = ActivityFeedClient.from_cookie(session)  # doctest: +SKIP
        >>> pager = ActivityFeedPaginator(client, DateRange(start, end))  # doctest: +SKIP
        >>> for activity in pager.activities():  # doctest: +SKIP
        ...     print(activity.uuid)
    """

    def __init__(
        self,
        post: FeedPost,
        date_range: DateRange,
        max_pages: int | None = DEFAULT_MAX_PAGES,
    ) -> None:
        if max_pages is not None and max_pages < 0:
            raise ConfigError(f"max_pages must be 0 (no limit) or positive, got {max_pages}")
        self.post = post
        self.date_range = date_range
        self.max_pages = max_pages or None
        self.requests_made = 0
        self._cursor: str | None = None
        self._has_more = True

    def _next_request(self) -> ActivityRequest:
        # A cursor is sent at most once
        cursor, self._cursor = self._cursor, None
        return ActivityRequest.for_range(self.date_range, cursor)

    def pages(self) -> Iterator[FeedSuccess]:
        """Yield successful pages until the feed reports no more data.

        Raises:
            ServiceFailure: The feed answered with a failure-tagged response.
            PaginationLimitError: ``max_pages`` reached with more data pending.
            TransportError: Propagated from the executor.
            DecodeError: The response did not match the feed shape.
        """
        while self._has_more:
            if self.max_pages is not None and self.requests_made >= self.max_pages:
                raise PaginationLimitError(self.max_pages)

            request = self._next_request()
            self.requests_made += 1
            logger.debug(
                "Requesting page %d (cursor=%s)",
                self.requests_made,
                request.pagination_option.cursor if request.pagination_option else None,
            )
            response = decode_response(self.post(request.to_wire()))

            if isinstance(response, FeedFailure):
                self._has_more = False
                logger.error("Error: %s", response.message)
                raise ServiceFailure(response.message)

            pagination = response.pagination
            self._has_more = pagination.has_more_data
            self._cursor = pagination.next_cursor
            if self._has_more and self._cursor is None:
                logger.warning(
                    "Feed reported more data without a cursor; requesting again from the start"
                )
            logger.info(
                "Fetched page %d with %d activities",
                self.requests_made,
                len(response.activity_list()),
            )
            yield response

    def activities(self) -> Iterator[Activity]:
        """Yield activities across all pages in feed order."""
        for page in self.pages():
            yield from page.activity_list()
