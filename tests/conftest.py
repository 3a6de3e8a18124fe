# SPDX-FileCopyrightText: 2025-present The schemaplus Project
#
# SPDX-License-Identifier: MIT
#
# PROGRAM/MODULE: schemaplus
# FILE:           tests/conftest.py
# DESCRIPTION:    Shared fixtures for schemaplus tests
# CREATED:        18.3.2025
#
# The contents of this file are subject to the MIT License
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in all
# copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.
#
# Copyright (c) 2025 The schemaplus Project
# All Rights Reserved.
#
# Contributor(s): ______________________________________

"""schemaplus - Shared fixtures for schemaplus tests

Catalog reads are served by `FakeConnection` from canned rows, and executed
statements are recorded, so tests run without a MySQL server.
"""

import pytest
from schemaplus.schema import Schema
from schemaplus.ddl import CascadingStatements, SchemaStatements

# --- Constants ---

#: CREATE TABLE statement as returned by SHOW CREATE TABLE for `orders`.
CREATE_ORDERS = """CREATE TABLE `orders` (
  `id` int NOT NULL AUTO_INCREMENT,
  `customer_id` int NOT NULL,
  `shipping_id` int DEFAULT NULL,
  `placed_at` datetime NOT NULL,
  PRIMARY KEY (`id`),
  KEY `fk_orders_customer` (`customer_id`),
  KEY `index_orders_on_placed_at` (`placed_at`),
  CONSTRAINT `fk_orders_customer` FOREIGN KEY (`customer_id`) REFERENCES `customers` (`id`) ON DELETE CASCADE,
  CONSTRAINT `fk_orders_shipping` FOREIGN KEY (`shipping_id`) REFERENCES `warehouse`.`shipments` (`id`) ON DELETE SET NULL ON UPDATE NO ACTION
) ENGINE=InnoDB DEFAULT CHARSET=utf8mb4"""

# --- Helpers ---

class DatabaseError(Exception):
    """Stands for error raised by database driver."""

class FakeConnection:
    """In-memory replacement for `schemaplus.connection.Connection`.

    Queries are answered with rows registered by `on()` for the most recently
    registered SQL fragment contained in the query. Unmatched queries return
    no rows. Statements passed to `execute()` are recorded in `statements`,
    including the one that fails when `fail_on` fragment matches.
    """
    def __init__(self, current_namespace='shop'):
        self.statements: list[str] = []
        self.queries: list[str] = []
        self.fail_on: str | None = None
        self._namespace = current_namespace
        self._responses: list[tuple[str, list[dict]]] = []
    def on(self, fragment: str, rows: list[dict]) -> 'FakeConnection':
        self._responses.insert(0, (fragment, rows))
        return self
    def execute(self, sql: str) -> int:
        self.statements.append(sql)
        if self.fail_on is not None and self.fail_on in sql:
            raise DatabaseError(f"Cannot execute: {sql}")
        return 0
    def select(self, sql: str) -> list[dict]:
        self.queries.append(sql)
        for fragment, rows in self._responses:
            if fragment in sql:
                return [dict(row) for row in rows]
        return []
    def quote_identifier(self, ident: str) -> str:
        return '`' + ident.replace('`', '``') + '`'
    def quote_table_name(self, table_name: str) -> str:
        return '.'.join(self.quote_identifier(part) for part in table_name.split('.'))
    def quote_literal(self, value) -> str:
        if value is None:
            return 'NULL'
        return "'" + str(value).replace("'", "''") + "'"
    def current_namespace(self) -> str:
        return self._namespace

# --- Fixtures ---

@pytest.fixture
def connection():
    """Fresh `FakeConnection` for each test."""
    return FakeConnection()

@pytest.fixture
def schema(connection):
    """`Schema` bound to the fake connection."""
    with Schema().bind(connection) as s:
        yield s

@pytest.fixture
def ddl(schema):
    """`CascadingStatements` over the bound schema."""
    return CascadingStatements(SchemaStatements(schema))
