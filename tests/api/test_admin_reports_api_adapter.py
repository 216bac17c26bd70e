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
Admin Reports API adapter tests
"""

import json
from unittest.mock import MagicMock

import pytest
from google.auth.exceptions import DefaultCredentialsError

from googleworkspace.api import admin_reports_api_adapter as adapter_module
from googleworkspace.api import AdminReportsApiAdapter, load_credentials
from googleworkspace.config import ADMIN_REPORTS_SCOPES, ConnectionConfig
from googleworkspace.exceptions import ConfigurationError
from tests.mocks.api.admin_reports_api_mock import AdminReportsApiMock

SERVICE_ACCOUNT_INFO = {
    "type": "service_account",
    "client_email": "reports@project.iam.gserviceaccount.com",
}


class TestLoadCredentials:
    """
    Credential loading tests
    """

    @pytest.fixture
    def from_service_account_info(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> MagicMock:
        """
        Replaces the service account key loader.
        """
        loader = MagicMock()
        monkeypatch.setattr(
            adapter_module.service_account.Credentials,
            "from_service_account_info",
            loader,
        )
        return loader

    def test_service_account_content(
        self, from_service_account_info: MagicMock
    ) -> None:
        """
        Tests that key content is loaded and delegated to the admin.
        """
        config = ConnectionConfig(
            credentials=json.dumps(SERVICE_ACCOUNT_INFO),
            impersonated_user_email="admin@example.com",
        )

        credentials = load_credentials(config)

        from_service_account_info.assert_called_once_with(
            SERVICE_ACCOUNT_INFO, scopes=ADMIN_REPORTS_SCOPES
        )
        delegated = from_service_account_info.return_value.with_subject
        delegated.assert_called_once_with("admin@example.com")
        assert credentials == delegated.return_value

    def test_service_account_file(
        self, from_service_account_info: MagicMock, tmp_path
    ) -> None:
        """
        Tests that a key file path is read.
        """
        key_file = tmp_path / "key.json"
        key_file.write_text(json.dumps(SERVICE_ACCOUNT_INFO))
        config = ConnectionConfig(
            credentials=str(key_file),
            impersonated_user_email="admin@example.com",
        )

        load_credentials(config)

        from_service_account_info.assert_called_once_with(
            SERVICE_ACCOUNT_INFO, scopes=ADMIN_REPORTS_SCOPES
        )

    def test_service_account_file_missing(self, tmp_path) -> None:
        """
        Tests that a missing key file is a configuration error.
        """
        config = ConnectionConfig(
            credentials=str(tmp_path / "missing.json"),
            impersonated_user_email="admin@example.com",
        )

        with pytest.raises(ConfigurationError, match="not found"):
            load_credentials(config)

    def test_service_account_content_malformed(self) -> None:
        """
        Tests that undecodable key content is a configuration error.
        """
        config = ConnectionConfig(
            credentials="{not json",
            impersonated_user_email="admin@example.com",
        )

        with pytest.raises(ConfigurationError, match="Invalid credentials"):
            load_credentials(config)

    def test_token_file(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """
        Tests that an OAuth token file is used without a service account.
        """
        loader = MagicMock()
        monkeypatch.setattr(
            adapter_module.user_credentials.Credentials,
            "from_authorized_user_file",
            loader,
        )

        credentials = load_credentials(
            ConnectionConfig(token_path="/tmp/token.json")
        )

        loader.assert_called_once_with(
            "/tmp/token.json", scopes=ADMIN_REPORTS_SCOPES
        )
        assert credentials == loader.return_value

    def test_application_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """
        Tests that application default credentials are the fallback.
        """
        default = MagicMock(return_value=("default", "project"))
        monkeypatch.setattr(adapter_module.auth, "default", default)

        assert load_credentials(ConnectionConfig()) == "default"
        default.assert_called_once_with(scopes=ADMIN_REPORTS_SCOPES)

    def test_application_default_missing(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """
        Tests that missing default credentials are a configuration error.
        """
        default = MagicMock(side_effect=DefaultCredentialsError("none"))
        monkeypatch.setattr(adapter_module.auth, "default", default)

        with pytest.raises(ConfigurationError):
            load_credentials(ConnectionConfig())


class TestAdminReportsApiAdapter:
    """
    Admin Reports API adapter tests
    """

    def test_from_config(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """
        Tests that the discovery client is built with the plugin User-Agent.
        """
        build = MagicMock()
        monkeypatch.setattr(
            adapter_module, "load_credentials", MagicMock(return_value="c")
        )
        monkeypatch.setattr(
            adapter_module.google_auth_httplib2, "AuthorizedHttp", MagicMock()
        )
        monkeypatch.setattr(adapter_module.discovery, "build", build)

        adapter = AdminReportsApiAdapter.from_config(ConnectionConfig())

        args, kwargs = build.call_args
        assert args == ("admin", "reports_v1")
        assert kwargs["requestBuilder"] is adapter_module.CustomRequestBuilder
        assert adapter._plain_client == build.return_value

    def test_custom_request_builder_user_agent(self) -> None:
        """
        Tests that every request carries the plugin User-Agent.
        """
        request = adapter_module.CustomRequestBuilder(
            MagicMock(), None, "https://admin.googleapis.com/admin/reports/v1"
        )
        assert request.headers["User-Agent"] == adapter_module.USER_AGENT

    @pytest.mark.parametrize(
        "method, collection",
        [
            ("list_activities", "activities"),
            ("get_customer_usage", "customer_usage"),
            ("get_entity_usage", "entity_usage"),
            ("get_user_usage", "user_usage"),
        ],
    )
    def test_fetch_page(self, method: str, collection: str) -> None:
        """
        Tests that each report call goes to its collection with the given
        arguments.
        """
        page = {"items": [{"id": 1}]}
        service = AdminReportsApiMock(**{collection: {None: page}})
        adapter = AdminReportsApiAdapter(service)

        response = getattr(adapter, method)({"date": "2025-01-01"})

        assert response == page
        assert service.calls[collection] == [{"date": "2025-01-01"}]
