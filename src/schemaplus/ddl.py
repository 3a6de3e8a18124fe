# SPDX-FileCopyrightText: 2025-present The schemaplus Project
#
# SPDX-License-Identifier: MIT
#
# PROGRAM/MODULE: schemaplus
# FILE:           schemaplus/ddl.py
# DESCRIPTION:    DDL statements with foreign key cascades
# CREATED:        17.3.2025
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

"""schemaplus.ddl - Execute DDL that keeps foreign keys consistent.

MySQL rejects dropping a table that is referenced by foreign keys of other
tables, and dropping a column that takes part in a foreign key. It also keeps
constraint and index names unchanged when a table is renamed, so names derived
from the table name go stale.

This module provides two layers:

*   `SchemaStatements` executes single DDL statements (drop table, rename table,
    remove column, remove or rename index, add or remove foreign key).
*   `CascadingStatements` wraps a `SchemaStatements` instance and surrounds
    the structural changes with the foreign key and index work they depend on.

Example::

   schema = Schema().bind(connection)
   ddl = CascadingStatements(SchemaStatements(schema))
   ddl.drop_table('customers', cascade=True)
   ddl.rename_table('orders', 'purchases')

No statement opens or commits a transaction. A cascade is a sequence of
statements executed in order, and a failure leaves the statements executed
before it in effect. Wrap the call in a transaction where the server allows it.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from .names import foreign_key_index_name, index_name, without_namespace
from .schema import ForeignKey, Schema

logger = logging.getLogger(__name__)

class SchemaStatements:
    """Base DDL primitives executed over connection bound to `Schema`.

    Each method builds one statement with quoting provided by the schema's
    connection and executes it immediately. Database errors are not caught.

    Arguments:
        schema: Bound `~schemaplus.schema.Schema` instance.
    """
    def __init__(self, schema: Schema):
        #: The `Schema` used for quoting, introspection and execution.
        self.schema: Schema = schema
    def execute(self, sql: str) -> int:
        """Executes DDL statement and returns number of affected rows.
        """
        logger.info("Executing DDL: %s", sql)
        return self.schema.connection.execute(sql)
    def drop_table(self, table_name: str, *, temporary: bool=False, if_exists: bool=False) -> None:
        """Executes ``DROP [TEMPORARY] TABLE [IF EXISTS] <table>``.
        """
        sql = 'DROP'
        if temporary:
            sql += ' TEMPORARY'
        sql += ' TABLE'
        if if_exists:
            sql += ' IF EXISTS'
        self.execute(f'{sql} {self.schema.quote_table_name(table_name)}')
    def rename_table(self, old_name: str, new_name: str) -> None:
        """Executes ``RENAME TABLE <old_name> TO <new_name>``.
        """
        quote = self.schema.quote_table_name
        self.execute(f'RENAME TABLE {quote(old_name)} TO {quote(new_name)}')
    def remove_column(self, table_name: str, column_name: str) -> None:
        """Executes ``ALTER TABLE <table> DROP COLUMN <column>``.
        """
        self.execute(f'ALTER TABLE {self.schema.quote_table_name(table_name)} '
                     f'DROP COLUMN {self.schema.quote_identifier(column_name)}')
    def remove_index(self, table_name: str, *, name: str | None=None,
                     columns: str | Iterable[str] | None=None) -> None:
        """Executes ``DROP INDEX <index> ON <table>``.

        Arguments:
            table_name: Possibly schema-qualified table name.
            name: Index name. When omitted, conventional index name for `columns`
                  is used (see `~schemaplus.names.index_name`).
            columns: Column name or list of column names.

        Raises:
            ValueError: When neither `name` nor `columns` is specified.
        """
        if name is None:
            if columns is None:
                raise ValueError("Index name or columns must be specified.")
            name = index_name(table_name, columns)
        self.execute(f'DROP INDEX {self.schema.quote_identifier(name)} '
                     f'ON {self.schema.quote_table_name(table_name)}')
    def rename_index(self, table_name: str, old_name: str, new_name: str) -> None:
        """Executes ``ALTER TABLE <table> RENAME INDEX <old_name> TO <new_name>``.
        """
        quote = self.schema.quote_identifier
        self.execute(f'ALTER TABLE {self.schema.quote_table_name(table_name)} '
                     f'RENAME INDEX {quote(old_name)} TO {quote(new_name)}')
    def add_foreign_key(self, foreign_key: ForeignKey, *, table_name: str | None=None,
                        name: str | None=None) -> None:
        """Adds `foreign_key` to its table, or to `table_name` under `name` when given.
        """
        params = {}
        if table_name is not None:
            params['table'] = table_name
        if name is not None:
            params['name'] = name
        self.execute(foreign_key.get_sql_for('create', **params))
    def remove_foreign_key(self, table_name: str, name: str) -> None:
        """Executes ``ALTER TABLE <table> DROP FOREIGN KEY <name>``.
        """
        self.execute(f'ALTER TABLE {self.schema.quote_table_name(table_name)} '
                     f'DROP FOREIGN KEY {self.schema.quote_identifier(name)}')

class CascadingStatements:
    """DDL operations that handle dependent foreign keys and generated names.

    Each operation inspects the catalog through `Schema`, performs the dependent
    steps, and delegates the structural change to the wrapped `SchemaStatements`.

    Arguments:
        statements: Base DDL primitives to delegate to.
    """
    #: Configuration option: If True, `rename_table()` also renames indices and
    #: foreign keys whose generated names embed the old table name. Defaults to True.
    opt_rename_constraints: bool = True
    def __init__(self, statements: SchemaStatements):
        #: The wrapped base DDL primitives.
        self.statements: SchemaStatements = statements
    def _rename_indices(self, old_name: str, new_name: str) -> None:
        for index in self.schema.get_indices(new_name):
            if index.is_primary() or index.name != index_name(old_name, index.column_names):
                continue
            target = index_name(new_name, index.column_names)
            logger.info("Renaming index %s of %s to %s", index.name, new_name, target)
            self.statements.rename_index(new_name, index.name, target)
    def _rename_foreign_keys(self, old_name: str, new_name: str) -> None:
        old_bare = without_namespace(old_name)
        new_bare = without_namespace(new_name)
        for fk in self.schema.get_foreign_keys(new_name):
            if old_bare not in fk.name:
                continue
            target = fk.name.replace(old_bare, new_bare, 1)
            logger.info("Renaming foreign key %s of %s to %s", fk.name, new_name, target)
            self.statements.remove_foreign_key(new_name, fk.name)
            fk_index = foreign_key_index_name(old_name, fk.column_names)
            if self.schema.has_index(new_name, name=fk_index):
                self.statements.rename_index(new_name, fk_index,
                                             foreign_key_index_name(new_name, fk.column_names))
            self.statements.add_foreign_key(fk, table_name=new_name, name=target)
    def drop_table(self, table_name: str, *, cascade: bool=False, temporary: bool=False,
                   if_exists: bool=False) -> None:
        """Drops table, optionally removing foreign keys that reference it first.

        Arguments:
            table_name: Possibly schema-qualified table name.
            cascade: When True, every foreign key declared on other tables (or on
                     the table itself) that references `table_name` is removed
                     before the table is dropped.
            temporary: Drop ``TEMPORARY`` table.
            if_exists: Add ``IF EXISTS`` clause.
        """
        if cascade:
            for fk in self.schema.get_reverse_foreign_keys(table_name):
                logger.info("Removing foreign key %s of %s referencing %s",
                            fk.name, fk.table_name, table_name)
                self.statements.remove_foreign_key(fk.table_name, fk.name)
        self.statements.drop_table(table_name, temporary=temporary, if_exists=if_exists)
    def remove_column(self, table_name: str, column_name: str) -> None:
        """Removes column after removing foreign keys of the table it takes part in.

        Column names are compared case-insensitively.
        """
        column = column_name.lower()
        for fk in self.schema.get_foreign_keys(table_name):
            if column in (name.lower() for name in fk.column_names):
                logger.info("Removing foreign key %s of %s on column %s",
                            fk.name, table_name, column_name)
                self.statements.remove_foreign_key(table_name, fk.name)
        self.statements.remove_column(table_name, column_name)
    def rename_table(self, old_name: str, new_name: str) -> None:
        """Renames table, then renames indices and foreign keys named after it.

        After the base rename, when `opt_rename_constraints` is True:

        *   Indices named ``index_<old>_on_<columns>`` are renamed to
            ``index_<new>_on_<columns>``.
        *   Foreign keys whose name contains the old bare table name are dropped
            and added again with the first occurrence of the old name replaced by
            the new one. Their automatic ``fk__<old>_<columns>`` index is renamed
            in between.
        """
        self.statements.rename_table(old_name, new_name)
        if not self.opt_rename_constraints:
            return
        self._rename_indices(old_name, new_name)
        self._rename_foreign_keys(old_name, new_name)
    def remove_index(self, table_name: str, *, if_exists: bool=False, name: str | None=None,
                     columns: str | Iterable[str] | None=None) -> None:
        """Removes index identified by `name` or `columns`.

        Arguments:
            table_name: Possibly schema-qualified table name.
            if_exists: When True and no such index exists, nothing is executed.
            name: Index name. When omitted, conventional index name for `columns`
                  is used, and only an index of that name counts as existing.
            columns: Column name or list of column names.

        Raises:
            ValueError: When neither `name` nor `columns` is specified.
        """
        if name is None and columns is None:
            raise ValueError("Index name or columns must be specified.")
        if isinstance(columns, str):
            columns = [columns]
        elif columns is not None:
            columns = list(columns)
        if name is None:
            name = index_name(table_name, columns)
        if if_exists and not self.schema.has_index(table_name, name=name, columns=columns):
            logger.debug("Index %s on %s does not exist, nothing to remove", name, table_name)
            return
        self.statements.remove_index(table_name, name=name)
    @property
    def schema(self) -> Schema:
        """The `Schema` of wrapped statements."""
        return self.statements.schema
