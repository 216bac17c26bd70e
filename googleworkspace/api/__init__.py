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
This module provides the adapter for the Google Workspace Admin Reports API
and the pieces that turn a query into API calls: the time filter
translation, the request arguments and the page streaming.
"""

from googleworkspace.api.admin_reports_api_adapter import (
    AdminReportsApiAdapter,
    load_credentials,
)
from googleworkspace.api.page_streamer import PageStreamer
from googleworkspace.api.request_builder import (
    MAX_RESULTS,
    build_activities_request,
    build_customer_usage_request,
    build_entity_usage_request,
    build_user_usage_request,
    page_size,
    with_page_token,
)
from googleworkspace.api.time_filter import (
    TimeRange,
    format_timestamp,
    parse_timestamp,
    translate_time_quals,
)
