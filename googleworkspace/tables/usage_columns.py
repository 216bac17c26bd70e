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
Columns shared by the usage report tables. Every usage report carries the
date it covers, the entity it is about and its list of parameters.
"""

from googleworkspace.plugin import Column, ColumnType, from_field

# The items of a usage report response are listed under this key.
USAGE_REPORTS_KEY = "usageReports"


def usage_report_columns() -> list[Column]:
    return [
        Column(
            "date",
            ColumnType.STRING,
            "Represents the date the usage occurred. The timestamp is in "
            "the ISO 8601 format, yyyy-mm-dd",
        ),
        Column(
            "customer_id",
            ColumnType.STRING,
            "The unique ID of the customer to retrieve data for",
            from_field("entity.customerId"),
        ),
        Column(
            "parameters",
            ColumnType.JSON,
            "Parameter value pairs for the various applications",
        ),
        Column(
            "user_email",
            ColumnType.STRING,
            "The user's email address",
            from_field("entity.userEmail"),
        ),
        Column(
            "profile_id",
            ColumnType.STRING,
            "The user's immutable Google Workspace profile identifier",
            from_field("entity.profileId"),
        ),
        Column(
            "entity_id",
            ColumnType.STRING,
            "Object key",
            from_field("entity.entityId"),
        ),
        Column(
            "type",
            ColumnType.STRING,
            "The type of item",
            from_field("entity.type"),
        ),
    ]
