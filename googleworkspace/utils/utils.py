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
This module provides the logging setup and the helpers used to read values
out of the JSON documents returned by the Admin Reports API.
"""

import logging
import os
from typing import Any


def get_logger():
    """
    Configures and retrieves the root logger with a specified logging
    level and format.
    """
    logging.basicConfig(
        level=os.environ.get("GOOGLE_WORKSPACE_LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s - %(filename)s - %(levelname)s - %(message)s",
    )
    logger = logging.getLogger()
    return logger


def to_camel_case(name: str) -> str:
    """
    Converts a snake_case column name into the camelCase key used by the API,
    e.g. "owner_domain" -> "ownerDomain".
    """
    head, *tail = name.split("_")
    return head + "".join(part.capitalize() for part in tail)


def get_path(document: dict[str, Any] | None, path: str) -> Any:
    """
    Resolves a dotted path such as "actor.profileId" against a decoded JSON
    document. Returns None as soon as a segment is missing.
    """
    value = document
    for key in path.split("."):
        if not isinstance(value, dict):
            return None
        value = value.get(key)
    return value
