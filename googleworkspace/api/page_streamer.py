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
This module drives a paginated Admin Reports call to completion, streaming
every item of every page to the query in document order.

Classes:
- PageStreamer: Fetches pages by continuation token and streams their items.
"""

from typing import Any, Callable

from googleworkspace.plugin.query_data import QueryData
from googleworkspace.utils import get_logger

type FetchPage = Callable[[str | None], dict[str, Any]]


class PageStreamer:
    """
    Streams the items of a paginated response.

    The cancellation token of the query is polled after each item. Once it
    is raised the rest of the current page is skipped and no further page
    is fetched. Errors raised while fetching a page propagate unchanged.
    """

    def __init__(
        self,
        items_key: str,
        cursor_response_key: str = "nextPageToken",
    ) -> None:
        self.items_key = items_key
        self.cursor_response_key = cursor_response_key
        self._logger = get_logger()

    def stream(self, fetch_page: FetchPage, query: QueryData) -> int:
        """
        Fetches pages until no continuation token is left and streams their
        items. Returns the number of items streamed.
        """
        streamed = 0
        page_token = None
        page_number = 0

        while True:
            page_number += 1
            try:
                page = fetch_page(page_token)
            except Exception as e:
                self._logger.error(
                    "Failed to fetch page %d: %s", page_number, str(e)
                )
                raise

            self._log_warnings(page)
            items = page.get(self.items_key) or []
            self._logger.debug(
                "Fetched page %d with %d items", page_number, len(items)
            )

            page_token = page.get(self.cursor_response_key)
            for item in items:
                query.stream_list_item(item)
                streamed += 1

                if query.is_cancelled():
                    page_token = None
                    break

            if not page_token:
                return streamed

    def _log_warnings(self, page: dict[str, Any]) -> None:
        for warning in page.get("warnings") or []:
            self._logger.warning(
                "Admin Reports API warning %s: %s",
                warning.get("code"),
                warning.get("message"),
            )
