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
This module provides the host-facing primitives of the plugin: the query
state handed to a table and the table metadata the host plans queries with.
"""

from googleworkspace.plugin.query_data import CancellationToken, Qual, QueryData
from googleworkspace.plugin.table import (
    Column,
    ColumnType,
    KeyColumn,
    Require,
    Table,
    from_field,
    from_qual,
)
