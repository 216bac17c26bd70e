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
This module provides the definitions of the Admin Reports tables.
"""

from googleworkspace.tables.admin_reports_activities import (
    table_admin_reports_activities,
)
from googleworkspace.tables.admin_reports_customer_usage import (
    table_admin_reports_customer_usage,
)
from googleworkspace.tables.admin_reports_entity_usage import (
    table_admin_reports_entity_usage,
)
from googleworkspace.tables.admin_reports_user_usage import (
    table_admin_reports_user_usage,
)
