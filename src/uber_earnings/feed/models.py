"""Typed Pydantic models for the activity feed request and response.

The feed speaks camelCase JSON; the models use snake_case and map between
the two with ``to_camel`` as the alias generator. Decoding failures of any
kind surface as DecodeError.

Response shape::

    {"status": "failure", "data": {"message": "..."}}
    {"status": "success", "data": {
        "activities": [...] | null,
        "pagination": {"hasMoreData": true, "nextCursor": "..." | null}}}
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Annotated, Any, Literal, Union

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    StrictBool,
    StrictStr,
    TypeAdapter,
    ValidationError,
)
from pydantic.alias_generators import to_camel

from uber_earnings.exceptions import DecodeError
from uber_earnings.utils import from_epoch_seconds


def _epoch_seconds(value: Any) -> datetime:
    # bool is an int subclass; the wire never sends booleans here
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"expected integer seconds, got {type(value).__name__}")
    return from_epoch_seconds(value)


EpochSeconds = Annotated[datetime, BeforeValidator(_epoch_seconds)]


class WireModel(BaseModel):
    """Base for feed models: camelCase on the wire, immutable, extras ignored."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


@dataclass(frozen=True)
class DateRange:
    """Inclusive calendar date range. Not validated; the service decides."""

    start: date
    end: date


# ------------------------- Request -------------------------
class PaginationOption(WireModel):
    cursor: str


class ActivityRequest(WireModel):
    """Body of one feed request."""

    start_date_iso: date
    end_date_iso: date
    pagination_option: PaginationOption | None = None

    @classmethod
    def for_range(cls, date_range: DateRange, cursor: str | None = None) -> ActivityRequest:
        option = PaginationOption(cursor=cursor) if cursor is not None else None
        return cls(
            start_date_iso=date_range.start,
            end_date_iso=date_range.end,
            pagination_option=option,
        )

    def to_wire(self) -> dict[str, Any]:
        """Serialize to the JSON object sent on the wire.

        ``paginationOption`` is left out entirely when no cursor is held;
        the service treats an explicit null differently from a missing key.
        """
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


# ------------------------- Activity -------------------------
class Routing(WireModel):
    webview_url: StrictStr


class BreakdownDetails(WireModel):
    formatted_tip: StrictStr


class TripMetaData(WireModel):
    formatted_duration: StrictStr
    formatted_distance: StrictStr
    pickup_address: StrictStr
    drop_off_address: StrictStr
    map_url: StrictStr


class Activity(WireModel):
    """One earnings event (trip, adjustment, promotion, ...).

    Attributes:
        uuid: Unique activity id.
        type: Activity type tag, e.g. "TRIP".
        recognized_at: When the earning was recognized (aware, UTC), sent as
            integer epoch seconds.
        activity_title: Display title.
        formatted_total: Total amount, already formatted with currency.
        routing: Link to the activity's detail page.
        breakdown_details: Tip information, if the service sent it.
        trip_meta_data: Trip details, if the activity is a trip.
    """

    uuid: StrictStr
    type: StrictStr = Field(alias="type")
    recognized_at: EpochSeconds
    activity_title: StrictStr
    formatted_total: StrictStr
    routing: Routing
    breakdown_details: BreakdownDetails | None = None
    trip_meta_data: TripMetaData | None = None


# ------------------------- Response -------------------------
class Pagination(WireModel):
    has_more_data: StrictBool
    next_cursor: StrictStr | None = None


class FailureData(WireModel):
    message: StrictStr


class SuccessData(WireModel):
    activities: list[Activity] | None = None
    pagination: Pagination


class FeedFailure(WireModel):
    """A well-formed response in which the service reports an error."""

    status: Literal["failure"] = "failure"
    data: FailureData

    @property
    def message(self) -> str:
        return self.data.message


class FeedSuccess(WireModel):
    """One page of activities.

    ``activities`` is None when the service left the list out.
    """

    status: Literal["success"] = "success"
    data: SuccessData

    @property
    def activities(self) -> list[Activity] | None:
        return self.data.activities

    @property
    def pagination(self) -> Pagination:
        return self.data.pagination

    def activity_list(self) -> list[Activity]:
        return self.data.activities or []


ActivityFeedResponse = Annotated[Union[FeedSuccess, FeedFailure], Field(discriminator="status")]

_RESPONSE_ADAPTER: TypeAdapter[FeedSuccess | FeedFailure] = TypeAdapter(ActivityFeedResponse)


def _decode_error(e: ValidationError) -> DecodeError:
    problems = "; ".join(
        f"{'.'.join(str(part) for part in err['loc']) or 'response'}: {err['msg']}"
        for err in e.errors()
    )
    return DecodeError(f"Unexpected activity feed response: {problems}")


def parse_feed_response(payload: Any) -> FeedSuccess | FeedFailure:
    """Build an ActivityFeedResponse from an already-parsed JSON value.

    Args:
        payload: Decoded JSON (normally a dict).

    Returns:
        FeedSuccess or FeedFailure, depending on ``status``.

    Raises:
        DecodeError: If the shape does not match, including any ``status``
            other than "success" or "failure".

    """
    try:
        return _RESPONSE_ADAPTER.validate_python(payload)
    except ValidationError as e:
        raise _decode_error(e) from e


def decode_feed_response(raw: bytes | str) -> FeedSuccess | FeedFailure:
    """Parse raw JSON bytes into an ActivityFeedResponse.

    Raises:
        DecodeError: If the body is not JSON or does not match the feed shape.
    """
    try:
        return _RESPONSE_ADAPTER.validate_json(raw)
    except ValidationError as e:
        raise _decode_error(e) from e
