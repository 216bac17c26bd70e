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
This module defines the googleworkspace_admin_reports_user_usage table,
which lists the per-user usage reports of one day through
userUsageReport.get of the Admin Reports API.
"""

from googleworkspace.api import (
    AdminReportsApiAdapter,
    PageStreamer,
    build_user_usage_request,
    page_size,
    with_page_token,
)
from googleworkspace.entities import UserUsageFilters
from googleworkspace.plugin import (
    Column,
    ColumnType,
    KeyColumn,
    QueryData,
    Require,
    Table,
    from_qual,
)
from googleworkspace.tables.usage_columns import (
    USAGE_REPORTS_KEY,
    usage_report_columns,
)
from googleworkspace.utils import get_logger

TABLE_NAME = "googleworkspace_admin_reports_user_usage"


def table_admin_reports_user_usage() -> Table:
    """
    Returns the definition of the user usage table.
    """
    return Table(
        name=TABLE_NAME,
        description="Retrieves usage reports including statistics",
        key_columns=[
            KeyColumn("date", Require.REQUIRED),
            KeyColumn("user_key"),
            KeyColumn("customer_id"),
            KeyColumn("org_unit_id"),
            KeyColumn("filters"),
            KeyColumn("parameters"),
            KeyColumn("group_id_filter"),
        ],
        columns=usage_report_columns()
        + [
            Column(
                "org_unit_id",
                ColumnType.STRING,
                "ID of the organizational unit to report on",
                from_qual("org_unit_id"),
            ),
            Column(
                "filters",
                ColumnType.STRING,
                "Comma-separated list of an application's event parameters "
                "where the parameter's value is manipulated by a relational "
                "operator",
                from_qual("filters"),
            ),
            Column(
                "group_id_filter",
                ColumnType.STRING,
                "Comma separated group ids on which user activities are "
                "filtered",
                from_qual("group_id_filter"),
            ),
            Column(
                "user_key",
                ColumnType.STRING,
                "Represents the profile ID or the user email for which the "
                "data should be filtered",
                from_qual("user_key"),
            ),
        ],
        list_fn=list_admin_reports_user_usage,
    )


def list_admin_reports_user_usage(
    query: QueryData, adapter: AdminReportsApiAdapter
) -> None:
    """
    Streams the user usage reports of the requested date.
    """
    filters = UserUsageFilters.from_key_column_quals(query.key_column_quals)
    params = build_user_usage_request(filters, page_size(query.limit))

    streamed = PageStreamer(USAGE_REPORTS_KEY).stream(
        lambda page_token: adapter.get_user_usage(
            with_page_token(params, page_token)
        ),
        query,
    )

    get_logger().info(
        "Listed %d user usage reports of %s for %s",
        streamed,
        filters.user_key,
        filters.date,
    )
