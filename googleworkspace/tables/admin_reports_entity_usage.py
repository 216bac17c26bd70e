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
This module defines the googleworkspace_admin_reports_entity_usage table,
which lists the usage reports of the entities of one type (e.g.
gplus_communities) through entityUsageReports.get of the Admin Reports API.
"""

from googleworkspace.api import (
    AdminReportsApiAdapter,
    PageStreamer,
    build_entity_usage_request,
    page_size,
    with_page_token,
)
from googleworkspace.entities import EntityUsageFilters
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

TABLE_NAME = "googleworkspace_admin_reports_entity_usage"


def table_admin_reports_entity_usage() -> Table:
    """
    Returns the definition of the entity usage table.
    """
    return Table(
        name=TABLE_NAME,
        description="Retrieves usage reports including statistics",
        key_columns=[
            KeyColumn("date", Require.REQUIRED),
            KeyColumn("entity_type", Require.REQUIRED),
            KeyColumn("entity_key"),
            KeyColumn("customer_id"),
            KeyColumn("filters"),
            KeyColumn("parameters"),
        ],
        columns=usage_report_columns()
        + [
            Column(
                "filters",
                ColumnType.STRING,
                "Comma-separated list of an application's event parameters "
                "where the parameter's value is manipulated by a relational "
                "operator",
                from_qual("filters"),
            ),
            Column(
                "entity_key",
                ColumnType.STRING,
                "Represents the key of the object to filter the data with",
                from_qual("entity_key"),
            ),
            Column(
                "entity_type",
                ColumnType.STRING,
                "Represents the type of entity for the report",
                from_qual("entity_type"),
            ),
        ],
        list_fn=list_admin_reports_entity_usage,
    )


def list_admin_reports_entity_usage(
    query: QueryData, adapter: AdminReportsApiAdapter
) -> None:
    """
    Streams the entity usage reports of the requested date and entity type.
    """
    filters = EntityUsageFilters.from_key_column_quals(query.key_column_quals)
    params = build_entity_usage_request(filters, page_size(query.limit))

    streamed = PageStreamer(USAGE_REPORTS_KEY).stream(
        lambda page_token: adapter.get_entity_usage(
            with_page_token(params, page_token)
        ),
        query,
    )

    get_logger().info(
        "Listed %d %s usage reports for %s",
        streamed,
        filters.entity_type,
        filters.date,
    )
