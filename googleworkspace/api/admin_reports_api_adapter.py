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
This module provides an adapter for interacting with
the Google Workspace Admin Reports API.
It includes functionality for loading the credentials of a connection and
fetching single pages of activity and usage reports.

Classes:
- CustomRequestBuilder: Adds the plugin User-Agent to every request.
- AdminReportsApiAdapter: An adapter class for interacting
  with the Admin Reports API.
"""

import json
import os
from typing import Any

import google.auth as auth
import google_auth_httplib2
from google.auth.credentials import Credentials
from google.oauth2 import credentials as user_credentials
from google.oauth2 import service_account
from googleapiclient import discovery
from googleapiclient.http import HttpRequest

from googleworkspace.config import ADMIN_REPORTS_SCOPES, ConnectionConfig
from googleworkspace.exceptions import credentials_exception_shield
from googleworkspace.utils import get_logger

USER_AGENT = "GoogleWorkspaceReportsTables/1.0.0"


class CustomRequestBuilder(HttpRequest):
    """
    A custom request builder that extends `googleapiclient.http.HttpRequest`
    to include a custom `User-Agent` header for all outgoing HTTP requests.
    """

    def __init__(
        self,
        http,
        postproc,
        uri,
        method="GET",
        body=None,
        headers=None,
        methodId=None,
        resumable=None,
    ):
        if headers is None:
            headers = {}
        headers["User-Agent"] = USER_AGENT
        super().__init__(
            http, postproc, uri, method, body, headers, methodId, resumable
        )


def _read_service_account_info(credentials: str) -> dict[str, Any]:
    """
    Reads a service account key given either as JSON content or as the
    path of the key file.
    """
    if credentials.lstrip().startswith("{"):
        return json.loads(credentials)

    with open(os.path.expanduser(credentials), encoding="utf-8") as key_file:
        return json.load(key_file)


@credentials_exception_shield
def load_credentials(config: ConnectionConfig) -> Credentials:
    """
    Loads the credentials of a connection. A service account key takes
    precedence over an OAuth token file; without either, application
    default credentials are used.
    """
    if config.credentials:
        info = _read_service_account_info(config.credentials)
        credentials = service_account.Credentials.from_service_account_info(
            info, scopes=ADMIN_REPORTS_SCOPES
        )
        return credentials.with_subject(config.impersonated_user_email)

    if config.token_path:
        return user_credentials.Credentials.from_authorized_user_file(
            os.path.expanduser(config.token_path), scopes=ADMIN_REPORTS_SCOPES
        )

    credentials, _ = auth.default(scopes=ADMIN_REPORTS_SCOPES)
    return credentials


class AdminReportsApiAdapter:
    """
    An adapter class for interacting with the Admin Reports API.
    Each call fetches a single page; the arguments come from
    `googleworkspace.api.request_builder`.
    """

    def __init__(self, service: Any) -> None:
        """
        Initializes the AdminReportsApiAdapter with a discovery client of
        the admin reports_v1 API.
        """
        self._plain_client = service
        self._logger = get_logger()

    @classmethod
    def from_config(cls, config: ConnectionConfig) -> "AdminReportsApiAdapter":
        """
        Builds an adapter authorized with the credentials of the connection.
        """
        credentials = load_credentials(config)
        http = google_auth_httplib2.AuthorizedHttp(credentials)
        service = discovery.build(
            "admin",
            "reports_v1",
            http=http,
            requestBuilder=CustomRequestBuilder,
            cache_discovery=False,
        )
        return cls(service)

    def list_activities(self, params: dict[str, Any]) -> dict[str, Any]:
        """
        Fetches a page of activities for one application.
        """
        self._logger.debug("Listing activities with %s", params)
        return self._plain_client.activities().list(**params).execute()

    def get_customer_usage(self, params: dict[str, Any]) -> dict[str, Any]:
        """
        Fetches a page of the customer usage report of a day.
        """
        self._logger.debug("Getting customer usage with %s", params)
        return (
            self._plain_client.customerUsageReports().get(**params).execute()
        )

    def get_entity_usage(self, params: dict[str, Any]) -> dict[str, Any]:
        """
        Fetches a page of the usage report of entities of one type.
        """
        self._logger.debug("Getting entity usage with %s", params)
        return self._plain_client.entityUsageReports().get(**params).execute()

    def get_user_usage(self, params: dict[str, Any]) -> dict[str, Any]:
        """
        Fetches a page of the usage report of users.
        """
        self._logger.debug("Getting user usage with %s", params)
        return self._plain_client.userUsageReport().get(**params).execute()
