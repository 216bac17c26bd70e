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
This module builds the keyword arguments of the Admin Reports API calls
from the typed filters of a query. Optional parameters are only attached
when a value was supplied.
"""

from typing import Any

from googleworkspace.api.time_filter import TimeRange
from googleworkspace.entities import (
    ActivitiesFilters,
    CustomerUsageFilters,
    EntityUsageFilters,
    UserUsageFilters,
)

# The maximum number of items the API returns in a single page.
MAX_RESULTS = 1000


def page_size(limit: int | None) -> int:
    """
    Returns the page size to request: the row limit hint of the query,
    capped at MAX_RESULTS.
    """
    if limit is None:
        return MAX_RESULTS
    return min(limit, MAX_RESULTS)


def _attach_optional(params: dict[str, Any], **optional: Any) -> dict:
    params.update(
        {name: value for name, value in optional.items() if value is not None}
    )
    return params


def build_activities_request(
    filters: ActivitiesFilters, time_range: TimeRange, max_results: int
) -> dict[str, Any]:
    """
    Builds the arguments of activities.list.
    """
    params = {
        "userKey": filters.user_key,
        "applicationName": filters.application_name,
        "maxResults": max_results,
    }
    params.update(time_range.to_params())

    return _attach_optional(
        params,
        actorIpAddress=filters.actor_ip_address,
        customerId=filters.customer_id,
        eventName=filters.event_name,
        filters=filters.filters,
        orgUnitID=filters.org_unit_id,
        groupIdFilter=filters.group_id_filter,
    )


def build_customer_usage_request(
    filters: CustomerUsageFilters,
) -> dict[str, Any]:
    """
    Builds the arguments of customerUsageReports.get. The endpoint takes
    no page size.
    """
    return _attach_optional(
        {"date": filters.date},
        customerId=filters.customer_id,
        parameters=filters.parameters,
    )


def build_entity_usage_request(
    filters: EntityUsageFilters, max_results: int
) -> dict[str, Any]:
    """
    Builds the arguments of entityUsageReports.get.
    """
    params = {
        "entityType": filters.entity_type,
        "entityKey": filters.entity_key,
        "date": filters.date,
        "maxResults": max_results,
    }

    return _attach_optional(
        params,
        customerId=filters.customer_id,
        filters=filters.filters,
        parameters=filters.parameters,
    )


def build_user_usage_request(
    filters: UserUsageFilters, max_results: int
) -> dict[str, Any]:
    """
    Builds the arguments of userUsageReport.get.
    """
    params = {
        "userKey": filters.user_key,
        "date": filters.date,
        "maxResults": max_results,
    }

    return _attach_optional(
        params,
        customerId=filters.customer_id,
        orgUnitID=filters.org_unit_id,
        filters=filters.filters,
        parameters=filters.parameters,
        groupIdFilter=filters.group_id_filter,
    )


def with_page_token(
    params: dict[str, Any], page_token: str | None
) -> dict[str, Any]:
    """
    Returns the arguments for the page identified by the continuation
    token. The first page has no token.
    """
    if not page_token:
        return params
    return {**params, "pageToken": page_token}
