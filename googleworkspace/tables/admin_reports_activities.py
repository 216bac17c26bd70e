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
This module defines the googleworkspace_admin_reports_activities table,
which lists the activity records of one application through
activities.list of the Admin Reports API.

Without a predicate on the time column only the activities of the last
24 hours are requested.
"""

from googleworkspace.api import (
    AdminReportsApiAdapter,
    PageStreamer,
    build_activities_request,
    page_size,
    translate_time_quals,
    with_page_token,
)
from googleworkspace.entities import ActivitiesFilters
from googleworkspace.plugin import (
    Column,
    ColumnType,
    KeyColumn,
    QueryData,
    Require,
    Table,
    from_field,
    from_qual,
)
from googleworkspace.utils import get_logger

TABLE_NAME = "googleworkspace_admin_reports_activities"
TIME_OPERATORS = (">", ">=", "=", "<", "<=")


def table_admin_reports_activities() -> Table:
    """
    Returns the definition of the activities table.
    """
    return Table(
        name=TABLE_NAME,
        description="Retrieves activity reports for one application",
        key_columns=[
            KeyColumn("application_name", Require.REQUIRED),
            KeyColumn("user_key"),
            KeyColumn("actor_ip_address"),
            KeyColumn("customer_id"),
            KeyColumn("time", operators=TIME_OPERATORS),
            KeyColumn("event_name"),
            KeyColumn("filters"),
            KeyColumn("org_unit_id"),
            KeyColumn("group_id_filter"),
        ],
        columns=[
            Column(
                "application_name",
                ColumnType.STRING,
                "The application name for query",
                from_field("id.applicationName"),
            ),
            Column(
                "user_key",
                ColumnType.STRING,
                "The user id or email to retrieve",
                from_field("actor.key"),
            ),
            Column(
                "actor_ip_address",
                ColumnType.STRING,
                "An actor's ip address to retrieve",
                from_field("ipAddress"),
            ),
            Column(
                "customer_id",
                ColumnType.STRING,
                "The customer id for each activity record",
                from_field("id.customerId"),
            ),
            Column(
                "owner_domain",
                ColumnType.STRING,
                "The domain affected by the activity",
            ),
            Column("ip_address", ColumnType.STRING, "The IP of the actor"),
            Column("events", ColumnType.JSON, "Activity events in the report"),
            Column(
                "time",
                ColumnType.STRING,
                "Time of occurrence of the activity",
                from_field("id.time"),
            ),
            Column(
                "unique_qualifier",
                ColumnType.STRING,
                "Unique qualifier if multiple events have the same time",
                from_field("id.uniqueQualifier"),
            ),
            Column(
                "profile_id",
                ColumnType.STRING,
                "The profile id of the actor",
                from_field("actor.profileId"),
            ),
            Column(
                "email",
                ColumnType.STRING,
                "The email of the actor",
                from_field("actor.email"),
            ),
            Column(
                "caller_type",
                ColumnType.STRING,
                "The caller type of the actor",
                from_field("actor.callerType"),
            ),
            Column(
                "event_name",
                ColumnType.STRING,
                "The name of the event being queried by the API",
                from_qual("event_name"),
            ),
            Column(
                "filters",
                ColumnType.STRING,
                "A query string to filter for specific event parameters",
                from_qual("filters"),
            ),
            Column(
                "org_unit_id",
                ColumnType.STRING,
                "ID of the organizational unit to report on",
                from_qual("org_unit_id"),
            ),
            Column(
                "group_id_filter",
                ColumnType.STRING,
                "Group ids on which user activities are filtered",
                from_qual("group_id_filter"),
            ),
        ],
        list_fn=list_admin_reports_activities,
    )


def list_admin_reports_activities(
    query: QueryData, adapter: AdminReportsApiAdapter
) -> None:
    """
    Streams the activities matching the filters of the query.
    """
    logger = get_logger()
    filters = ActivitiesFilters.from_key_column_quals(query.key_column_quals)
    time_range = translate_time_quals(query.pushed_quals_for("time"))

    if time_range.is_empty:
        logger.debug(
            "Skipping %s, time predicates select an empty window", TABLE_NAME
        )
        return

    params = build_activities_request(
        filters, time_range, page_size(query.limit)
    )
    streamed = PageStreamer("items").stream(
        lambda page_token: adapter.list_activities(
            with_page_token(params, page_token)
        ),
        query,
    )

    logger.info(
        "Listed %d %s activities for %s",
        streamed,
        filters.application_name,
        filters.user_key,
    )
