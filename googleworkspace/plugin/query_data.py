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
This module defines the per-query state the host hands to a table: the
predicates of the query, the row limit hint, the sink rows are streamed to
and the cancellation token polled while streaming.

Classes:
- Qual: A single predicate on a column.
- CancellationToken: Cooperative cancellation flag shared with the host.
- QueryData: The state of one query execution.
"""

from dataclasses import dataclass
from typing import Any, Callable

type RowSink = Callable[[dict[str, Any]], None]
type RowMapper = Callable[[Any], dict[str, Any]]


@dataclass(frozen=True)
class Qual:
    """
    A predicate on a column, e.g. Qual("date", "=", "2025-01-01").
    """

    column: str
    operator: str
    value: Any


class CancellationToken:
    """
    A cancellation flag raised by the host when it needs no more rows.
    It is polled between items and never interrupts a request in flight.
    """

    def __init__(self) -> None:
        self._cancelled = False

    def cancel(self) -> None:
        self._cancelled = True

    @property
    def is_cancelled(self) -> bool:
        return self._cancelled


class QueryData:
    """
    The state of one query execution against a table.
    """

    def __init__(
        self,
        quals: list[Qual] | None = None,
        limit: int | None = None,
        row_sink: RowSink | None = None,
        cancellation: CancellationToken | None = None,
    ) -> None:
        """
        Initializes the query state. When no row sink is given, streamed rows
        are collected in the rows attribute.
        """
        self.quals = list(quals or [])
        self.limit = limit
        self.rows: list[dict[str, Any]] = []
        self._row_sink = row_sink or self.rows.append
        self.cancellation = cancellation or CancellationToken()
        self.row_mapper: RowMapper = lambda item: item
        self.key_column_quals: dict[str, Any] = {}
        self.pushed_quals: list[Qual] = []
        self.rows_streamed = 0

    def quals_for(self, column: str) -> list[Qual]:
        """
        Returns the predicates on the given column in the order they were
        supplied.
        """
        return [qual for qual in self.quals if qual.column == column]

    def pushed_quals_for(self, column: str) -> list[Qual]:
        """
        Returns the predicates on the column that the table accepted as
        request filters.
        """
        return [qual for qual in self.pushed_quals if qual.column == column]

    def equals_qual_value(self, column: str) -> Any:
        """
        Returns the value of the last equality predicate on the column, or
        None if there is none.
        """
        values = [
            qual.value
            for qual in self.quals_for(column)
            if qual.operator == "="
        ]
        return values[-1] if values else None

    def stream_list_item(self, item: Any) -> None:
        """
        Maps the item to a row and hands it to the row sink. Once the row
        limit is satisfied the cancellation token is raised.
        """
        self._row_sink(self.row_mapper(item))
        self.rows_streamed += 1

        if self.limit is not None and self.rows_streamed >= self.limit:
            self.cancellation.cancel()

    def is_cancelled(self) -> bool:
        return self.cancellation.is_cancelled
