"""Unit tests for feed request encoding and response decoding."""

import json
from datetime import date, datetime, timezone

import pytest
from pydantic import ValidationError

from conftest import activity_payload, failure_page, success_page, trip_payload
from uber_earnings.exceptions import DecodeError
from uber_earnings.feed.models import (
    ActivityRequest,
    DateRange,
    FeedFailure,
    FeedSuccess,
    decode_feed_response,
    parse_feed_response,
)

JANUARY = DateRange(date(2024, 1, 1), date(2024, 1, 31))


def test_request_without_cursor_omits_pagination_option() -> None:
    """No cursor means no paginationOption key at all, not null."""
    body = ActivityRequest.for_range(JANUARY).to_wire()
    assert body == {"startDateIso": "2024-01-01", "endDateIso": "2024-01-31"}
    assert "paginationOption" not in body
    assert "null" not in json.dumps(body)


def test_request_with_cursor() -> None:
    body = ActivityRequest.for_range(JANUARY, "p2").to_wire()
    assert body["paginationOption"] == {"cursor": "p2"}


def test_request_empty_cursor_is_still_sent() -> None:
    """An empty string is a cursor value, distinct from no cursor."""
    body = ActivityRequest.for_range(JANUARY, "").to_wire()
    assert body["paginationOption"] == {"cursor": ""}


def test_request_dates_are_not_validated() -> None:
    body = ActivityRequest.for_range(DateRange(date(2024, 2, 1), date(2024, 1, 1))).to_wire()
    assert body["startDateIso"] == "2024-02-01"
    assert body["endDateIso"] == "2024-01-01"


def test_decode_success_page() -> None:
    raw = json.dumps(
        success_page(
            [activity_payload(breakdown={"formattedTip": "$2.00"}, trip=trip_payload())],
            has_more=True,
            cursor="next",
        )
    ).encode()
    response = decode_feed_response(raw)

    assert isinstance(response, FeedSuccess)
    assert response.pagination.has_more_data is True
    assert response.pagination.next_cursor == "next"
    (activity,) = response.activities
    assert activity.uuid == "abc"
    assert activity.type == "trip"
    assert activity.recognized_at == datetime(2024, 1, 1, 9, 6, 40, tzinfo=timezone.utc)
    assert activity.routing.webview_url == "https://x"
    assert activity.breakdown_details.formatted_tip == "$2.00"
    assert activity.trip_meta_data.drop_off_address == '2 "Elm" St, Shelbyville'


def test_decode_failure_page() -> None:
    response = decode_feed_response(json.dumps(failure_page("quota exceeded")))
    assert isinstance(response, FeedFailure)
    assert response.status == "failure"
    assert response.message == "quota exceeded"


def test_missing_and_null_optionals_are_absent() -> None:
    page = success_page(None)
    page["data"]["pagination"]["nextCursor"] = None
    item = activity_payload()
    item["breakdownDetails"] = None
    page["data"]["activities"] = [item]

    response = parse_feed_response(page)
    assert response.pagination.next_cursor is None
    assert response.activities[0].breakdown_details is None
    assert response.activities[0].trip_meta_data is None


def test_activities_absent_is_none_but_lists_empty() -> None:
    response = parse_feed_response(success_page(None))
    assert response.activities is None
    assert response.activity_list() == []


def test_unknown_fields_are_ignored() -> None:
    item = activity_payload()
    item["somethingNew"] = {"nested": True}
    response = parse_feed_response(success_page([item]))
    assert response.activities[0].uuid == "abc"


@pytest.mark.parametrize(
    "payload, fragment",
    [
        ({"status": "pending", "data": {}}, "pending"),
        ({"data": {"message": "x"}}, "status"),
        ({"status": "failure", "data": {}}, "data.message: Field required"),
        ({"status": "success", "data": {"activities": []}}, "data.pagination: Field required"),
        (
            {"status": "success", "data": {"pagination": {"hasMoreData": "yes"}}},
            "pagination.hasMoreData: Input should be a valid boolean",
        ),
        (["not", "an", "object"], "Unexpected activity feed response"),
    ],
)
def test_shape_mismatch_raises_decode_error(payload, fragment) -> None:
    with pytest.raises(DecodeError) as exc_info:
        parse_feed_response(payload)
    assert fragment in str(exc_info.value)


def test_missing_required_activity_field() -> None:
    item = activity_payload()
    del item["formattedTotal"]
    with pytest.raises(DecodeError) as exc_info:
        parse_feed_response(success_page([item]))
    assert "data.activities.0.formattedTotal: Field required" in str(exc_info.value)


def test_partial_trip_meta_data_is_an_error() -> None:
    trip = trip_payload()
    del trip["mapUrl"]
    with pytest.raises(DecodeError):
        parse_feed_response(success_page([activity_payload(trip=trip)]))


@pytest.mark.parametrize("bad", ["1704100000", 1704100000.5, True, 10**20])
def test_bad_timestamps_raise_decode_error(bad) -> None:
    with pytest.raises(DecodeError):
        parse_feed_response(success_page([activity_payload(recognized_at=bad)]))


def test_malformed_json_raises_decode_error() -> None:
    with pytest.raises(DecodeError):
        decode_feed_response(b"<html>Sign in</html>")


def test_boolean_timestamp_is_rejected_not_read_as_one() -> None:
    """bool is an int subclass; True must not become 1970-01-01T00:00:01."""
    with pytest.raises(DecodeError) as exc_info:
        parse_feed_response(success_page([activity_payload(recognized_at=True)]))
    assert "recognizedAt" in str(exc_info.value)
    assert "expected integer seconds, got bool" in str(exc_info.value)


def test_string_fields_are_not_coerced() -> None:
    item = activity_payload()
    item["uuid"] = 123
    with pytest.raises(DecodeError) as exc_info:
        parse_feed_response(success_page([item]))
    assert "activities.0.uuid" in str(exc_info.value)


def test_request_accepts_field_names_and_dumps_camel_case() -> None:
    request = ActivityRequest(
        start_date_iso=date(2024, 1, 1),
        end_date_iso=date(2024, 1, 2),
        pagination_option={"cursor": "c1"},
    )
    assert request.to_wire() == {
        "startDateIso": "2024-01-01",
        "endDateIso": "2024-01-02",
        "paginationOption": {"cursor": "c1"},
    }


def test_models_are_immutable() -> None:
    response = parse_feed_response(success_page([activity_payload()]))
    with pytest.raises(ValidationError):
        response.activities[0].uuid = "other"
