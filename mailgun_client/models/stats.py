"""Domain statistics query request and builder.

Author: Odiseo
Created: 2026-10-17
Version: 1.0.0
"""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator

from mailgun_client.core.clock import DEFAULT_CLOCK, Clock
from mailgun_client.core.encoders import as_utc, to_unix_seconds
from mailgun_client.core.exceptions import MissingRequiredFieldError, OutOfRangeError
from mailgun_client.models.enums import (
    EventType,
    TimeResolution,
    get_event_type_name,
    get_time_resolution_name,
)
from mailgun_client.models.query_string import QueryStringBuilder

DEFAULT_STATS_RANGE = timedelta(days=7)


class StatsRequest(BaseModel):
    """Time range and event filter for the stats endpoint.

    Defaults to daily resolution over the seven days ending now. When both
    ``duration`` and ``resolution`` are set the range is rendered as
    ``duration=<N><h|d|m>`` and ``start``/``end`` are left out.

    Attributes:
        resolution: Bucket size of the returned series.
        duration: Number of resolution units to look back.
        event_types: Event types to report, rendered as repeated ``event``.
        start: Range start, defaults to ``end`` minus seven days.
        end: Range end, defaults to now.
    """

    resolution: TimeResolution | None = TimeResolution.DAY
    duration: int | None = None
    event_types: list[EventType] = Field(default_factory=list)
    start: datetime
    end: datetime

    @model_validator(mode="before")
    @classmethod
    def default_range(cls, data: Any) -> Any:
        if isinstance(data, dict):
            data = dict(data)
            if data.get("end") is None:
                data["end"] = DEFAULT_CLOCK.now()
            if data.get("start") is None:
                data["start"] = as_utc(data["end"]) - DEFAULT_STATS_RANGE
        return data

    @field_validator("start", "end")
    @classmethod
    def validate_moment(cls, v: datetime) -> datetime:
        return as_utc(v)

    def to_query_string(self) -> str:
        """Render as a bare query string, e.g. ``start=1700000000&end=1700604800``."""
        query = QueryStringBuilder(prefix="")

        if self.duration is not None and self.resolution is not None:
            query.append(
                "duration", f"{self.duration}{get_time_resolution_name(self.resolution)}"
            )
        else:
            query.append("start", to_unix_seconds(self.start))
            query.append("end", to_unix_seconds(self.end))

        for event_type in self.event_types:
            query.append("event", get_event_type_name(event_type))

        return query.build()


class StatsRequestBuilder:
    """Fluent builder for ``StatsRequest``.

    Args:
        clock: Time source for the default range (system clock if None).
    """

    def __init__(self, clock: Clock | None = None) -> None:
        self._request = StatsRequest(end=(clock or DEFAULT_CLOCK).now())

    def add_event_type(self, event_type: EventType) -> StatsRequestBuilder:
        if event_type is None:
            raise MissingRequiredFieldError("Event type cannot be null!", field="event_type")
        event_type = EventType(event_type)
        if event_type not in self._request.event_types:
            self._request.event_types.append(event_type)
        return self

    def set_time_resolution(self, resolution: TimeResolution) -> StatsRequestBuilder:
        if resolution is None:
            raise MissingRequiredFieldError("Resolution cannot be null!", field="resolution")
        self._request.resolution = TimeResolution(resolution)
        return self

    def set_time_duration(self, duration: int) -> StatsRequestBuilder:
        """Look back ``duration`` resolution units instead of a start/end range.

        Raises:
            OutOfRangeError: If duration is not positive.
        """
        if duration < 1:
            raise OutOfRangeError("Duration must be greater than zero!", field="duration")
        self._request.duration = duration
        return self

    def set_start_time(self, moment: datetime) -> StatsRequestBuilder:
        if moment is None:
            raise MissingRequiredFieldError("Start time cannot be null!", field="start")
        self._request.start = as_utc(moment)
        return self

    def set_end_time(self, moment: datetime) -> StatsRequestBuilder:
        if moment is None:
            raise MissingRequiredFieldError("End time cannot be null!", field="end")
        self._request.end = as_utc(moment)
        return self

    def build(self) -> StatsRequest:
        return self._request
