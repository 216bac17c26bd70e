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
Google Workspace Admin Reports tables for a SQL query host.

The host runs a query by handing a QueryData to Plugin.execute and reads
the rows from the row sink it supplied.
"""

from googleworkspace.plugin.plugin import Plugin, googleworkspace_plugin
from googleworkspace.plugin.query_data import CancellationToken, Qual, QueryData
