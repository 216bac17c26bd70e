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
Module to manage the connection configuration of the plugin. Options handed
over by the host take precedence over the matching environment variables.
"""

import os
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, ValidationError, model_validator

from googleworkspace.exceptions import ConfigurationError

ENVIRONMENT_VARIABLES = {
    "credentials": "GOOGLE_WORKSPACE_CREDENTIALS",
    "impersonated_user_email": "GOOGLE_WORKSPACE_IMPERSONATED_USER_EMAIL",
    "token_path": "GOOGLE_WORKSPACE_TOKEN_PATH",
}

ADMIN_REPORTS_SCOPES = [
    "https://www.googleapis.com/auth/admin.reports.audit.readonly",
    "https://www.googleapis.com/auth/admin.reports.usage.readonly",
]


class ConnectionConfig(BaseModel):
    """
    Connection options for the Admin Reports API.

    credentials is either the path to a service account key file or the
    content of the key itself. Service account keys need domain-wide
    delegation, so an impersonated admin email is required with them.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    credentials: Optional[str] = None
    impersonated_user_email: Optional[str] = None
    token_path: Optional[str] = None

    @model_validator(mode="after")
    def validate_impersonation(self) -> "ConnectionConfig":
        """
        Validates that 'impersonated_user_email' is provided together with
        'credentials'.
        """
        if self.credentials and not self.impersonated_user_email:
            raise ValueError(
                "'impersonated_user_email' is required when "
                "'credentials' is set"
            )
        return self


def get_connection_config(
    options: dict[str, Any] | None = None,
) -> ConnectionConfig:
    """
    Combines the options supplied by the host with the environment into a
    validated connection configuration.
    """
    options = dict(options or {})

    for option, variable in ENVIRONMENT_VARIABLES.items():
        if options.get(option) is None and os.environ.get(variable):
            options[option] = os.environ[variable]

    try:
        return ConnectionConfig(**options)
    except ValidationError as e:
        raise ConfigurationError(
            f"Invalid connection configuration: {e}"
        ) from e
