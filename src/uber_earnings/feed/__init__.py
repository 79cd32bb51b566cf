"""Activity feed access: wire models, HTTP executor and paginator.

Example:
    >>> from datetime import date
    >>> from uber_earnings.feed import ActivityFeedClient, ActivityFeedPaginator, DateRange
    >>>
    >>> client = ActivityFeedClient.from_cookie("sid=...;csid=...")  # doctest: +SKIP
    >>> pager = ActivityFeedPaginator(client, DateRange(date(2024, 1, 1), date(2024, 1, 31)))  # doctest: +SKIP
    >>> for activity in pager.activities():  # doctest: +SKIP
    ...     print(activity.activity_title, activity.formatted_total)

"""

from uber_earnings.feed.client import ActivityFeedClient, make_session
from uber_earnings.feed.models import (
    Activity,
    ActivityFeedResponse,
    ActivityRequest,
    BreakdownDetails,
    DateRange,
    FailureData,
    FeedFailure,
    FeedSuccess,
    Pagination,
    PaginationOption,
    Routing,
    SuccessData,
    TripMetaData,
    decode_feed_response,
    parse_feed_response,
)
from uber_earnings.feed.pagination import ActivityFeedPaginator

__all__ = [
    "Activity",
    "ActivityFeedClient",
    "ActivityFeedPaginator",
    "ActivityFeedResponse",
    "ActivityRequest",
    "BreakdownDetails",
    "DateRange",
    "FailureData",
    "FeedFailure",
    "FeedSuccess",
    "Pagination",
    "PaginationOption",
    "Routing",
    "SuccessData",
    "TripMetaData",
    "decode_feed_response",
    "make_session",
    "parse_feed_response",
]
