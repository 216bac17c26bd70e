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
Defines the Pydantic models holding the filters of a query against each
Admin Reports table. Field names match the key columns of the tables.
"""

import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, field_validator

ALL = "all"


class ReportFilters(BaseModel):
    """
    Base model for the filters of a report query.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    @classmethod
    def from_key_column_quals(cls, quals: dict[str, Any]) -> "ReportFilters":
        """
        Builds the filters from the equality values supplied for the key
        columns. Columns the model does not define are ignored and absent
        values fall back to the field defaults.
        """
        return cls(
            **{
                name: quals[name]
                for name in cls.model_fields
                if quals.get(name) is not None
            }
        )


class ActivitiesFilters(ReportFilters):
    """
    Filters of a query against the activities table.
    """

    application_name: str
    user_key: str = ALL
    actor_ip_address: Optional[str] = None
    customer_id: Optional[str] = None
    event_name: Optional[str] = None
    filters: Optional[str] = None
    org_unit_id: Optional[str] = None
    group_id_filter: Optional[str] = None


class UsageFilters(ReportFilters):
    """
    Filters shared by the usage report tables. The report date is
    formatted yyyy-mm-dd.
    """

    date: str
    customer_id: Optional[str] = None
    parameters: Optional[str] = None

    @field_validator("date", mode="before")
    @classmethod
    def format_date(cls, value: Any) -> Any:
        """
        Accepts dates handed over by the host as date or datetime objects.
        """
        if isinstance(value, datetime.datetime):
            value = value.date()
        if isinstance(value, datetime.date):
            return value.isoformat()
        return value


class CustomerUsageFilters(UsageFilters):
    """
    Filters of a query against the customer usage table.
    """


class EntityUsageFilters(UsageFilters):
    """
    Filters of a query against the entity usage table.
    """

    entity_type: str
    entity_key: str = ALL
    filters: Optional[str] = None


class UserUsageFilters(UsageFilters):
    """
    Filters of a query against the user usage table.
    """

    user_key: str = ALL
    org_unit_id: Optional[str] = None
    filters: Optional[str] = None
    group_id_filter: Optional[str] = None
