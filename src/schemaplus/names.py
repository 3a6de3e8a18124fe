# SPDX-FileCopyrightText: 2025-present The schemaplus Project
#
# SPDX-License-Identifier: MIT
#
# PROGRAM/MODULE: schemaplus
# FILE:           schemaplus/names.py
# DESCRIPTION:    Namespace handling for schema-qualified table names
# CREATED:        14.3.2025
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

"""schemaplus.names - Split, qualify and generate table-related identifiers.

Table names handled by this package may carry a schema qualifier
(``shop.orders``). Catalog queries work with bare names and a separate schema
predicate, so the helpers here take such names apart and put them back
together. The module also derives the conventional names generated for
indexes and foreign keys, which `~schemaplus.ddl.CascadingStatements` uses
to keep them in step with table renames.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import NamedTuple

#: Separator between schema qualifier and table name.
NAMESPACE_SEPARATOR = '.'

class TableName(NamedTuple):
    """Table name split into namespace prefix and bare name.

    The `prefix` is either empty or ends with `NAMESPACE_SEPARATOR`, so that
    ``prefix + bare`` always reassembles the original name.
    """
    #: Schema qualifier including trailing separator, or empty string.
    prefix: str
    #: Unqualified table identifier.
    bare: str
    def __str__(self):
        return self.prefix + self.bare
    @property
    def schema(self) -> str | None:
        """Schema name without separator, or `None` for unqualified names."""
        return self.prefix[:-len(NAMESPACE_SEPARATOR)] if self.prefix else None

def split_namespace(table_name: str) -> TableName:
    """Splits `table_name` at the *last* namespace separator.

    Arguments:
        table_name: Possibly schema-qualified table name.

    Example::

       split_namespace('shop.orders')  # TableName(prefix='shop.', bare='orders')
       split_namespace('orders')       # TableName(prefix='', bare='orders')
    """
    table_name = str(table_name)
    pos = table_name.rfind(NAMESPACE_SEPARATOR)
    if pos < 0:
        return TableName('', table_name)
    return TableName(table_name[:pos+1], table_name[pos+1:])

def namespace_prefix(table_name: str) -> str:
    """Returns namespace prefix of `table_name` (with separator), or empty string."""
    return split_namespace(table_name).prefix

def without_namespace(table_name: str) -> str:
    """Returns `table_name` stripped of any namespace qualifier."""
    return split_namespace(table_name).bare

def qualify(table_name: str, prefix: str) -> str:
    """Applies namespace `prefix` to `table_name` unless it's already qualified.
    """
    return table_name if namespace_prefix(table_name) else prefix + table_name

def schema_filter_sql(table_name: str, quote_literal: Callable[[str], str],
                      schema: str | None=None) -> str:
    """Returns SQL expression that selects the schema `table_name` lives in.

    Arguments:
        table_name: Possibly schema-qualified table name.
        quote_literal: Function used to quote the schema name as SQL string literal.
        schema: Explicit schema for unqualified names. When `None`, the session's
                current schema (``SCHEMA()``) is used.

    A schema qualifier on `table_name` takes precedence over `schema`.
    """
    if (qualifier := split_namespace(table_name).schema) is not None:
        return quote_literal(qualifier)
    if schema:
        return quote_literal(schema)
    return 'SCHEMA()'

def index_name(table_name: str, columns: str | Iterable[str]) -> str:
    """Returns conventional name of index on `columns` of `table_name`.
    """
    if isinstance(columns, str):
        columns = [columns]
    return f"index_{without_namespace(table_name)}_on_{'_and_'.join(columns)}"

def foreign_key_index_name(table_name: str, columns: str | Iterable[str]) -> str:
    """Returns name of index created automatically for foreign key on `columns`.
    """
    if isinstance(columns, str):
        columns = [columns]
    return f"fk__{without_namespace(table_name)}_{'_and_'.join(columns)}"
