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
This module defines the googleworkspace_admin_reports_customer_usage table,
which lists the account-wide usage report of one day through
customerUsageReports.get of the Admin Reports API.
"""

from googleworkspace.api import (
    AdminReportsApiAdapter,
    PageStreamer,
    build_customer_usage_request,
    with_page_token,
)
from googleworkspace.entities import CustomerUsageFilters
from googleworkspace.plugin import KeyColumn, QueryData, Require, Table
from googleworkspace.tables.usage_columns import (
    USAGE_REPORTS_KEY,
    usage_report_columns,
)
from googleworkspace.utils import get_logger

TABLE_NAME = "googleworkspace_admin_reports_customer_usage"


def table_admin_reports_customer_usage() -> Table:
    """
    Returns the definition of the customer usage table.
    """
    return Table(
        name=TABLE_NAME,
        description="Retrieves usage reports including statistics",
        key_columns=[
            KeyColumn("date", Require.REQUIRED),
            KeyColumn("customer_id"),
            KeyColumn("parameters"),
        ],
        columns=usage_report_columns(),
        list_fn=list_admin_reports_customer_usage,
    )


def list_admin_reports_customer_usage(
    query: QueryData, adapter: AdminReportsApiAdapter
) -> None:
    """
    Streams the customer usage reports of the requested date.
    """
    filters = CustomerUsageFilters.from_key_column_quals(
        query.key_column_quals
    )
    params = build_customer_usage_request(filters)

    streamed = PageStreamer(USAGE_REPORTS_KEY).stream(
        lambda page_token: adapter.get_customer_usage(
            with_page_token(params, page_token)
        ),
        query,
    )

    get_logger().info(
        "Listed %d customer usage reports for %s", streamed, filters.date
    )
