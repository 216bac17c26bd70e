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
This module defines the googleworkspace plugin: the registry of the Admin
Reports tables and the entry point the host runs a query through.

Classes:
- Plugin: A named set of tables sharing one connection configuration.
"""

from typing import Any, Callable

from googleworkspace.api import AdminReportsApiAdapter
from googleworkspace.config import get_connection_config
from googleworkspace.exceptions import TableNotFoundError
from googleworkspace.plugin.query_data import QueryData
from googleworkspace.plugin.table import Table
from googleworkspace.tables import (
    table_admin_reports_activities,
    table_admin_reports_customer_usage,
    table_admin_reports_entity_usage,
    table_admin_reports_user_usage,
)
from googleworkspace.utils import get_logger

PLUGIN_NAME = "googleworkspace"

type AdapterFactory = Callable[[], AdminReportsApiAdapter]


class Plugin:
    """
    A named set of tables. Queries get their own API adapter from the
    adapter factory unless the caller passes one in.
    """

    def __init__(
        self,
        name: str,
        tables: list[Table],
        connection_options: dict[str, Any] | None = None,
        adapter_factory: AdapterFactory | None = None,
    ) -> None:
        self.name = name
        self.tables = {table.name: table for table in tables}
        self.connection_options = connection_options or {}
        self._adapter_factory = adapter_factory or self._default_adapter
        self._logger = get_logger()

    def _default_adapter(self) -> AdminReportsApiAdapter:
        """
        Builds an adapter from the connection configuration.
        """
        config = get_connection_config(self.connection_options)
        return AdminReportsApiAdapter.from_config(config)

    def get_table(self, table_name: str) -> Table:
        """
        Returns the definition of a table.
        """
        table = self.tables.get(table_name)

        if table:
            return table
        raise TableNotFoundError(
            f"Table {table_name} not found in plugin {self.name}"
        )

    def execute(
        self,
        table_name: str,
        query: QueryData,
        adapter: AdminReportsApiAdapter | None = None,
    ) -> QueryData:
        """
        Runs a query against a table, streaming its rows to the row sink of
        the query. Returns the query so collected rows can be read back.
        """
        table = self.get_table(table_name)
        adapter = adapter or self._adapter_factory()

        self._logger.debug(
            "Executing %s with %d quals, limit %s",
            table_name,
            len(query.quals),
            query.limit,
        )
        table.list_rows(query, adapter)

        return query


def googleworkspace_plugin(
    connection_options: dict[str, Any] | None = None,
    adapter_factory: AdapterFactory | None = None,
) -> Plugin:
    """
    Returns the googleworkspace plugin with the Admin Reports tables.
    """
    return Plugin(
        PLUGIN_NAME,
        [
            table_admin_reports_activities(),
            table_admin_reports_customer_usage(),
            table_admin_reports_entity_usage(),
            table_admin_reports_user_usage(),
        ],
        connection_options,
        adapter_factory,
    )
