# Copyright 2025 Google LLC
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#   https://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
This module translates the predicates of a query on the activity time column
into the startTime and endTime parameters of the Admin Reports API.

Every predicate narrows the window: the effective start is the latest lower
bound supplied and the effective end the earliest upper bound. Bounds are
rendered in UTC with millisecond precision, e.g. "2025-01-31T08:15:00.000Z".

Classes:
- TimeRange: A start/end window built from time predicates.
"""

import re
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from googleworkspace.exceptions import ParseError
from googleworkspace.plugin.query_data import Qual

TIMESTAMP_PATTERN = re.compile(
    r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z$"
)
TIME_UNIT = timedelta(seconds=1)
DEFAULT_LOOKBACK = timedelta(hours=24)


def parse_timestamp(value: str | datetime) -> datetime:
    """
    Parses a time literal of the form YYYY-MM-DDTHH:MM:SS.mmmZ into an aware
    UTC datetime. Datetimes supplied by the host are normalized to UTC, naive
    ones are taken as UTC.
    """
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)

    if not isinstance(value, str) or not TIMESTAMP_PATTERN.match(value):
        raise ParseError(
            f"Cannot parse time {value!r}, expected format "
            "YYYY-MM-DDTHH:MM:SS.mmmZ"
        )

    try:
        parsed = datetime.strptime(value, "%Y-%m-%dT%H:%M:%S.%fZ")
    except ValueError as e:
        raise ParseError(f"Cannot parse time {value!r}: {e}") from e

    return parsed.replace(tzinfo=timezone.utc)


def format_timestamp(value: datetime) -> str:
    """
    Renders a datetime the way the Admin Reports API expects it.
    """
    value = value.astimezone(timezone.utc)
    return (
        value.strftime("%Y-%m-%dT%H:%M:%S")
        + f".{value.microsecond // 1000:03d}Z"
    )


@dataclass
class TimeRange:
    """
    A time window. A missing bound leaves that side of the window open.
    """

    start: datetime | None = None
    end: datetime | None = None

    def narrow_start(self, value: datetime) -> None:
        if self.start is None or value > self.start:
            self.start = value

    def narrow_end(self, value: datetime) -> None:
        if self.end is None or value < self.end:
            self.end = value

    def apply(self, operator: str, value: str | datetime) -> None:
        """
        Narrows the window with a single predicate.
        """
        instant = parse_timestamp(value)

        match operator:
            case ">":
                self.narrow_start(instant + TIME_UNIT)
            case ">=":
                self.narrow_start(instant)
            case "=":
                self.narrow_start(instant)
                self.narrow_end(instant)
            case "<=":
                self.narrow_end(instant)
            case "<":
                self.narrow_end(instant - TIME_UNIT)
            case _:
                raise ValueError(f"Unsupported time operator: {operator}")

    @property
    def is_empty(self) -> bool:
        """
        True when the predicates contradict each other and no instant can
        satisfy all of them.
        """
        return (
            self.start is not None
            and self.end is not None
            and self.start > self.end
        )

    def to_params(self) -> dict[str, str]:
        """
        Returns the startTime/endTime request parameters of the window.
        """
        params = {}
        if self.start is not None:
            params["startTime"] = format_timestamp(self.start)
        if self.end is not None:
            params["endTime"] = format_timestamp(self.end)
        return params


def translate_time_quals(
    quals: list[Qual], now: datetime | None = None
) -> TimeRange:
    """
    Builds the request window from the predicates on the time column.
    Without any predicate the window covers the trailing 24 hours.
    """
    if not quals:
        now = now or datetime.now(timezone.utc)
        return TimeRange(start=now - DEFAULT_LOOKBACK)

    time_range = TimeRange()
    for qual in quals:
        time_range.apply(qual.operator, qual.value)

    return time_range
