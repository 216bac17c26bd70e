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
This module provides the metadata the host uses to plan queries against a
table: the columns with their types and value extraction, and the key columns
the table accepts as filters.

Classes:
- ColumnType: Semantic types of the columns.
- Require: Cardinality of a key column.
- Column: A column of a table and how its value is extracted from an item.
- KeyColumn: A filter a table accepts and the operators legal on it.
- Table: A table definition and its listing routine.
"""

from dataclasses import dataclass
from enum import StrEnum
from typing import Any, Callable

from googleworkspace.plugin.query_data import Qual, QueryData
from googleworkspace.utils import get_logger, get_path, to_camel_case

type Transform = Callable[[Any, QueryData], Any]
type ListFunction = Callable[[QueryData, Any], None]


class ColumnType(StrEnum):
    STRING = "STRING"
    JSON = "JSON"


class Require(StrEnum):
    REQUIRED = "required"
    OPTIONAL = "optional"


def from_field(path: str) -> Transform:
    """
    Extracts the value at a dotted path of the item, e.g. "actor.key".
    """
    return lambda item, _: get_path(item, path)


def from_qual(column: str) -> Transform:
    """
    Echoes the value of the equality predicate on the column, for columns
    that only exist as request parameters.
    """
    return lambda _, query: query.equals_qual_value(column)


@dataclass(frozen=True)
class Column:
    """
    A column of a table. Without a transform the value is read from the
    top-level key of the item matching the camel-cased column name.
    """

    name: str
    type: ColumnType
    description: str = ""
    transform: Transform | None = None

    def value(self, item: Any, query: QueryData) -> Any:
        """
        Extracts the value of this column from an item.
        """
        if self.transform is not None:
            return self.transform(item, query)
        return get_path(item, to_camel_case(self.name))


@dataclass(frozen=True)
class KeyColumn:
    """
    A filter the table accepts. Operators lists the comparisons the host may
    push down for it.
    """

    name: str
    require: Require = Require.OPTIONAL
    operators: tuple[str, ...] = ("=",)


@dataclass
class Table:
    """
    A table definition consumed by the host.
    """

    name: str
    description: str
    columns: list[Column]
    key_columns: list[KeyColumn]
    list_fn: ListFunction

    def __post_init__(self) -> None:
        self._logger = get_logger()

    def get_column(self, name: str) -> Column | None:
        return next(
            (column for column in self.columns if column.name == name), None
        )

    def get_key_column(self, name: str) -> KeyColumn | None:
        return next(
            (column for column in self.key_columns if column.name == name),
            None,
        )

    def supported_quals(self, query: QueryData) -> list[Qual]:
        """
        Returns the predicates of the query that target a key column with an
        operator legal on it. Anything else is left to the host to filter.
        """
        supported = []
        for qual in query.quals:
            key_column = self.get_key_column(qual.column)
            if key_column and qual.operator in key_column.operators:
                supported.append(qual)
        return supported

    def key_column_quals(self, query: QueryData) -> dict[str, Any]:
        """
        Returns the equality values supplied for the key columns.
        """
        return {
            qual.column: qual.value
            for qual in self.supported_quals(query)
            if qual.operator == "="
        }

    def missing_required_key_columns(self, query: QueryData) -> list[str]:
        """
        Returns the names of the required key columns the query does not
        supply an equality value for.
        """
        supplied = self.key_column_quals(query)
        return [
            key_column.name
            for key_column in self.key_columns
            if key_column.require == Require.REQUIRED
            and supplied.get(key_column.name) is None
        ]

    def build_row(self, item: Any, query: QueryData) -> dict[str, Any]:
        """
        Builds the output row of an item.
        """
        return {
            column.name: column.value(item, query) for column in self.columns
        }

    def list_rows(self, query: QueryData, adapter: Any) -> None:
        """
        Runs the listing routine of the table, streaming rows to the query.
        A query missing a required filter or with a zero row limit yields
        no rows.
        """
        if query.limit == 0:
            self._logger.debug("Skipping %s, row limit is zero", self.name)
            return

        missing = self.missing_required_key_columns(query)
        if missing:
            self._logger.debug(
                "Skipping %s, missing required filters: %s",
                self.name,
                ", ".join(missing),
            )
            return

        query.key_column_quals = self.key_column_quals(query)
        query.pushed_quals = self.supported_quals(query)
        query.row_mapper = lambda item: self.build_row(item, query)
        self.list_fn(query, adapter)
