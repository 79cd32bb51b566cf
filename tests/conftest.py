"""Feed payload builders and a fake request executor shared by the tests."""

from __future__ import annotations

import json
from typing import Any


def activity_payload(
    uuid: str = "abc",
    *,
    type_: str = "trip",
    recognized_at: Any = 1704100000,
    title: str = "Trip",
    total: str = "$12.00",
    url: str = "https://x",
    breakdown: dict[str, Any] | None = None,
    trip: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Build one activity as the feed sends it (camelCase)."""
    item: dict[str, Any] = {
        "uuid": uuid,
        "type": type_,
        "recognizedAt": recognized_at,
        "activityTitle": title,
        "formattedTotal": total,
        "routing": {"webviewUrl": url},
    }
    if breakdown is not None:
        item["breakdownDetails"] = breakdown
    if trip is not None:
        item["tripMetaData"] = trip
    return item


def trip_payload() -> dict[str, Any]:
    return {
        "formattedDuration": "15 min",
        "formattedDistance": "4.2 mi",
        "pickupAddress": "1 Main St, Springfield",
        "dropOffAddress": '2 "Elm" St, Shelbyville',
        "mapUrl": "https://maps.example/abc",
    }


def success_page(
    activities: list[dict[str, Any]] | None,
    has_more: bool = False,
    cursor: str | None = None,
) -> dict[str, Any]:
    pagination: dict[str, Any] = {"hasMoreData": has_more}
    if cursor is not None:
        pagination["nextCursor"] = cursor
    data: dict[str, Any] = {"pagination": pagination}
    if activities is not None:
        data["activities"] = activities
    return {"status": "success", "data": data}


def failure_page(message: str) -> dict[str, Any]:
    return {"status": "failure", "data": {"message": message}}


class FakeFeed:
    """Request executor that replays scripted responses and records bodies."""

    def __init__(self, responses: list[dict[str, Any]]) -> None:
        self.responses = list(responses)
        self.requests: list[dict[str, Any]] = []

    def __call__(self, body: dict[str, Any]) -> bytes:
        # Serialize the body like requests would, so tests see the wire form
        self.requests.append(json.loads(json.dumps(body)))
        if not self.responses:
            raise AssertionError("FakeFeed ran out of responses")
        return json.dumps(self.responses.pop(0)).encode("utf-8")
