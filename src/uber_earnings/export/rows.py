"""Flatten one feed activity into one CSV row.

Projection is total: absent sub-records map to empty strings, so a row is
always fully built before anything is written.
"""

from __future__ import annotations

from datetime import tzinfo
from typing import NamedTuple

from uber_earnings.feed.models import Activity
from uber_earnings.utils import to_local

HEADER = (
    "UUID",
    "Type",
    "Date",
    "Time",
    "Title",
    "Total",
    "Url",
    "Tip",
    "Duration",
    "Distance",
    "Pickup",
    "DropOff",
    "MapUrl",
)


class OutputRow(NamedTuple):
    uuid: str
    type: str
    date: str
    time: str
    title: str
    total: str
    url: str
    tip: str
    duration: str
    distance: str
    pickup: str
    drop_off: str
    map_url: str


def project_activity(activity: Activity, tz: tzinfo | None = None) -> OutputRow:
    """Map an activity to its output row.

    Args:
        activity: Decoded feed activity.
        tz: Time zone for the Date/Time columns. Defaults to the system's
            local time zone.

    Returns:
        OutputRow with fields in HEADER order.

    """
    local = to_local(activity.recognized_at, tz)
    tip = activity.breakdown_details.formatted_tip if activity.breakdown_details else ""

    meta = activity.trip_meta_data
    if meta is not None:
        trip = (
            meta.formatted_duration,
            meta.formatted_distance,
            meta.pickup_address,
            meta.drop_off_address,
            meta.map_url,
        )
    else:
        trip = ("", "", "", "", "")

    return OutputRow(
        activity.uuid,
        activity.type,
        local.date().isoformat(),
        local.time().isoformat(),
        activity.activity_title,
        activity.formatted_total,
        activity.routing.webview_url,
        tip,
        *trip,
    )
