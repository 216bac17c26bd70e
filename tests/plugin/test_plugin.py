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
Plugin tests
"""

from unittest.mock import MagicMock

import pytest

from googleworkspace import Plugin, QueryData, Qual, googleworkspace_plugin
from googleworkspace.api import AdminReportsApiAdapter
from googleworkspace.exceptions import ConfigurationError, TableNotFoundError
from googleworkspace.plugin import plugin as plugin_module
from tests.mocks.api.admin_reports_api_mock import AdminReportsApiMock

TABLE_NAMES = [
    "googleworkspace_admin_reports_activities",
    "googleworkspace_admin_reports_customer_usage",
    "googleworkspace_admin_reports_entity_usage",
    "googleworkspace_admin_reports_user_usage",
]


class TestPlugin:
    """
    Plugin tests
    """

    @pytest.fixture
    def service(self) -> AdminReportsApiMock:
        """
        Provides a client serving one customer usage report.
        """
        return AdminReportsApiMock(
            customer_usage={
                None: {"usageReports": [{"date": "2025-01-01"}]}
            }
        )

    def test_tables(self) -> None:
        """
        Tests that the plugin registers the four report tables.
        """
        plugin = googleworkspace_plugin()

        assert plugin.name == "googleworkspace"
        assert sorted(plugin.tables) == TABLE_NAMES

    def test_get_table_unknown(self) -> None:
        with pytest.raises(TableNotFoundError):
            googleworkspace_plugin().get_table("googleworkspace_users")

    def test_execute_with_adapter(self, service: AdminReportsApiMock) -> None:
        """
        Tests that a query runs against the adapter passed by the caller.
        """
        query = QueryData([Qual("date", "=", "2025-01-01")])

        result = googleworkspace_plugin().execute(
            "googleworkspace_admin_reports_customer_usage",
            query,
            AdminReportsApiAdapter(service),
        )

        assert result is query
        assert [row["date"] for row in query.rows] == ["2025-01-01"]

    def test_execute_with_adapter_factory(
        self, service: AdminReportsApiMock
    ) -> None:
        """
        Tests that the adapter factory supplies the adapter by default.
        """
        factory = MagicMock(return_value=AdminReportsApiAdapter(service))
        plugin = googleworkspace_plugin(adapter_factory=factory)

        plugin.execute(
            "googleworkspace_admin_reports_customer_usage",
            QueryData([Qual("date", "=", "2025-01-01")]),
        )

        factory.assert_called_once_with()
        assert service.calls["customer_usage"] == [{"date": "2025-01-01"}]

    def test_default_adapter_uses_connection_options(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """
        Tests that the default adapter is built from the connection options.
        """
        from_config = MagicMock()
        monkeypatch.setattr(
            plugin_module.AdminReportsApiAdapter, "from_config", from_config
        )
        plugin = Plugin(
            "googleworkspace", [], {"token_path": "/tmp/token.json"}
        )

        assert plugin._default_adapter() == from_config.return_value
        config = from_config.call_args.args[0]
        assert config.token_path == "/tmp/token.json"

    def test_default_adapter_invalid_options(self) -> None:
        """
        Tests that invalid connection options abort before any request.
        """
        plugin = googleworkspace_plugin({"credentials": "/tmp/key.json"})

        with pytest.raises(ConfigurationError):
            plugin.execute(
                "googleworkspace_admin_reports_customer_usage",
                QueryData([Qual("date", "=", "2025-01-01")]),
            )
