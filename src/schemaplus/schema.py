# SPDX-FileCopyrightText: 2025-present The schemaplus Project
#
# SPDX-License-Identifier: MIT
#
# PROGRAM/MODULE: schemaplus
# FILE:           schemaplus/schema.py
# DESCRIPTION:    Introspection of MySQL foreign keys, indices and views
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

"""schemaplus.schema - Introspect foreign keys, indices and views of MySQL database.

The primary entry point is the `Schema` class, which is bound to a database
connection and answers questions the catalog does not answer with one uniform
query:

*   Foreign keys declared *on* a table, including their ``ON DELETE`` and
    ``ON UPDATE`` actions, are extracted from ``SHOW CREATE TABLE`` output by
    `parse_foreign_keys()`.
*   Foreign keys declared on *other* tables that reference a table are
    resolved from ``information_schema.key_column_usage``.
*   Base tables are told apart from views.

Nothing is cached. Every call queries the catalog again, so returned objects
always reflect the database state at the time of the call.

Schema elements are represented by subclasses of `SchemaItem` (`ForeignKey`,
`Index`) that offer properties to access their details and `get_sql_for()`
to generate DDL.
"""

from __future__ import annotations

import logging
import re
import weakref
from dataclasses import dataclass
from enum import Enum
from itertools import groupby
from typing import Any, Self

from firebird.base.collections import DataList
from firebird.base.types import Error
from sqlalchemy import engine as sa_engine

from .connection import Connection
from .names import namespace_prefix, qualify, schema_filter_sql, split_namespace

logger = logging.getLogger(__name__)

class ForeignKeyAction(Enum):
    """Referential action performed on ``DELETE`` or ``UPDATE`` of referenced row.
    """
    RESTRICT = 'restrict'
    CASCADE = 'cascade'
    SET_NULL = 'set_null'
    NO_ACTION = 'no_action'
    SET_DEFAULT = 'set_default'
    @classmethod
    def from_sql(cls, text: str) -> ForeignKeyAction:
        """Returns action for SQL action text like ``SET NULL`` (case-insensitive).
        """
        return cls('_'.join(text.lower().split()))
    @property
    def sql(self) -> str:
        """SQL text of the action (e.g. ``SET NULL``)."""
        return self.value.replace('_', ' ').upper()

class CheckOption(Enum):
    """View check option.
    """
    NONE = 'NONE'
    LOCAL = 'LOCAL'
    CASCADED = 'CASCADED'

_ACTION = r'RESTRICT|CASCADE|SET\s+NULL|NO\s+ACTION|SET\s+DEFAULT'

#: Pattern for ``CONSTRAINT ... FOREIGN KEY ...`` clause in ``SHOW CREATE TABLE`` output.
FOREIGN_KEY_PATTERN = re.compile(
    r'^\s*CONSTRAINT\s+[`"](?P<name>[^`"]+)[`"]\s+'
    r'FOREIGN\s+KEY\s*\((?P<columns>[^)]+)\)\s*'
    r'REFERENCES\s+(?P<table>(?:[`"][^`"]+[`"]\.)?[`"][^`"]+[`"])\s*'
    r'\((?P<referenced_columns>[^)]+)\)'
    rf'(?:\s+ON\s+DELETE\s+(?P<on_delete>{_ACTION}))?'
    rf'(?:\s+ON\s+UPDATE\s+(?P<on_update>{_ACTION}))?'
    r'\s*,?\s*$', re.IGNORECASE)

_FOREIGN_KEY_CLAUSE = re.compile(r'^\s*CONSTRAINT\s+\S+\s+FOREIGN\s+KEY\b', re.IGNORECASE)
_QUOTED = re.compile(r'[`"]([^`"]+)[`"]')

def _split_columns(text: str) -> list[str]:
    return [column.strip().strip('`"') for column in text.split(',')]

def parse_foreign_keys(table_name: str, create_sql: str, schema: Schema | None=None) -> list[ForeignKey]:
    """Extracts foreign keys from ``CREATE TABLE`` statement of `table_name`.

    Each line of `create_sql` is matched against the constraint clause written
    by ``SHOW CREATE TABLE``::

        CONSTRAINT `name` FOREIGN KEY (`col`, ...) REFERENCES `table` (`col`, ...)
          [ON DELETE <action>] [ON UPDATE <action>][,]

    Lines that are not foreign key clauses (columns, keys, table options) are
    skipped, and so are clauses that do not follow this shape. Extraction never
    fails on unexpected input.

    Arguments:
        table_name: Name of the table described by `create_sql`. Its namespace prefix
                    is applied to referenced tables that are not qualified.
        create_sql: Text of the ``CREATE TABLE`` statement.
        schema: `Schema` the returned items are bound to. Unbound items can't
                generate SQL.

    Returns:
        List of `ForeignKey` instances in declaration order.
    """
    prefix = namespace_prefix(table_name)
    result = []
    for line in create_sql.splitlines():
        if (match := FOREIGN_KEY_PATTERN.match(line)) is None:
            if _FOREIGN_KEY_CLAUSE.match(line):
                logger.debug("Skipping unrecognized foreign key clause of %s: %s",
                             table_name, line.strip())
            continue
        columns = _split_columns(match['columns'])
        referenced_columns = _split_columns(match['referenced_columns'])
        if len(columns) != len(referenced_columns) or '' in columns + referenced_columns:
            logger.debug("Skipping foreign key %s of %s with mismatched column lists",
                         match['name'], table_name)
            continue
        on_delete = match['on_delete']
        on_update = match['on_update']
        result.append(ForeignKey(schema, {
            'CONSTRAINT_NAME': match['name'],
            'TABLE_NAME': table_name,
            'REFERENCED_TABLE_NAME': qualify('.'.join(_QUOTED.findall(match['table'])), prefix),
            'COLUMN_NAMES': columns,
            'REFERENCED_COLUMN_NAMES': referenced_columns,
            'DELETE_RULE': ForeignKeyAction.from_sql(on_delete) if on_delete else ForeignKeyAction.RESTRICT,
            'UPDATE_RULE': ForeignKeyAction.from_sql(on_update) if on_update else ForeignKeyAction.RESTRICT,
            }))
    return result

@dataclass(frozen=True)
class ViewDefinition:
    """Defining query of a view.

    Instances are immutable.
    """
    #: The ``SELECT`` statement, without qualification by the view's own database.
    select_text: str
    #: View check option
    check_option: CheckOption = CheckOption.NONE
    def __str__(self):
        return self.sql
    @property
    def sql(self) -> str:
        """View query with ``WITH ... CHECK OPTION`` clause appended when set."""
        if self.check_option is CheckOption.NONE:
            return self.select_text
        return f'{self.select_text} WITH {self.check_option.value} CHECK OPTION'

class Schema:
    """Provides access to foreign keys, indices and views of a MySQL database.

    The instance must be bound to a connection with `bind()` before use, and
    could be used as context manager that unbinds it on exit. The connection
    is not owned by `Schema` and it's not closed by `close()`.

    Key Behaviors:

    *   **No Caching:** Each method issues fresh catalog queries. There is no
        cache to clear or reload.
    *   **Explicit Schema:** Table names may be qualified (``shop.orders``).
        Unqualified names refer to the session's current database. Methods
        that list objects accept an explicit `schema` argument.
    *   **Item Binding:** Returned `SchemaItem` instances keep a weak reference
        to this `Schema` that they use to quote identifiers in generated SQL.

    Example::

       with Schema().bind(connection) as schema:
           for fk in schema.get_reverse_foreign_keys('customers'):
               print(fk.table_name, fk.column_names)
    """
    def __init__(self):
        #: Bound connection, or None if closed/unbound.
        self._con: Connection | None = None
    def __enter__(self) -> Self:
        return self
    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()
    def __fail_if_closed(self):
        if self.closed:
            raise Error("Schema is not bound to connection.")
    def _schema_sql(self, schema: str | None) -> str:
        return 'SCHEMA()' if schema is None else self.quote_literal(schema)
    def _select(self, cmd: str) -> list[dict[str, Any]]:
        self.__fail_if_closed()
        logger.debug("Catalog query: %s", cmd)
        return [{key.upper(): value for key, value in row.items()} for row in self._con.select(cmd)]
    def bind(self, connection: Connection | sa_engine.Connection) -> Self:
        """Binds this Schema instance to a database connection.

        Arguments:
            connection: `~schemaplus.connection.Connection` (or any object with the
                        same methods). SQLAlchemy connection is wrapped automatically.

        Returns:
            The bound `Schema` instance (`self`).
        """
        if isinstance(connection, sa_engine.Connection):
            connection = Connection(connection)
        self._con = connection
        return self
    def close(self) -> None:
        """Unbinds the Schema from its connection. The connection is left open.
        """
        self._con = None
    def quote_identifier(self, ident: str) -> str:
        """Returns `ident` quoted as SQL identifier."""
        self.__fail_if_closed()
        return self._con.quote_identifier(ident)
    def quote_table_name(self, table_name: str) -> str:
        """Returns possibly schema-qualified `table_name` quoted for SQL."""
        self.__fail_if_closed()
        return self._con.quote_table_name(table_name)
    def quote_literal(self, value: Any) -> str:
        """Returns `value` quoted as SQL literal."""
        self.__fail_if_closed()
        return self._con.quote_literal(value)
    def get_current_database(self) -> str | None:
        """Returns name of the session's current database.
        """
        self.__fail_if_closed()
        return self._con.current_namespace()
    def get_create_table_sql(self, table_name: str) -> str | None:
        """Returns ``CREATE TABLE`` statement for `table_name` as reported by
        ``SHOW CREATE TABLE``, or `None` when no statement is returned.
        """
        rows = self._select(f'SHOW CREATE TABLE {self.quote_table_name(table_name)}')
        return rows[0].get('CREATE TABLE') if rows else None
    def get_foreign_keys(self, table_name: str) -> DataList[ForeignKey]:
        """Returns foreign keys declared on `table_name`.

        Constraints are parsed from ``SHOW CREATE TABLE`` output, which is the only
        source carrying ``ON DELETE``/``ON UPDATE`` actions together with cross-schema
        references. See `parse_foreign_keys()`.

        Arguments:
            table_name: Possibly schema-qualified table name.

        Returns:
            Frozen `.DataList` of `ForeignKey` in declaration order, keyed by name.
        """
        create_sql = self.get_create_table_sql(table_name) or ''
        return DataList(parse_foreign_keys(table_name, create_sql, self), ForeignKey,
                        'item.name', frozen=True)
    def get_reverse_foreign_keys(self, table_name: str) -> DataList[ForeignKey]:
        """Returns foreign keys declared on other tables that reference `table_name`.

        Rows from ``information_schema.key_column_usage`` are grouped by constraint
        name, owning table and referenced table. Columns within a group are ordered by
        their ordinal position, so composite keys keep positional correspondence
        between `~ForeignKey.column_names` and `~ForeignKey.references_column_names`.
        Referenced table names are compared case-insensitively.

        .. note::

           Constraint actions are not available from this catalog view, so
           `~ForeignKey.on_delete` and `~ForeignKey.on_update` of returned items
           are `None`. Use `get_foreign_keys()` on the owning table to get them.

        Arguments:
            table_name: Possibly schema-qualified table name.

        Returns:
            Frozen `.DataList` of `ForeignKey` ordered by constraint name, keyed by name.
        """
        name = split_namespace(table_name)
        cmd = f"""select CONSTRAINT_NAME, TABLE_NAME, COLUMN_NAME, REFERENCED_TABLE_NAME,
  REFERENCED_COLUMN_NAME, ORDINAL_POSITION
from information_schema.key_column_usage
where table_schema = {schema_filter_sql(table_name, self.quote_literal)}
  and referenced_table_schema = table_schema and referenced_table_name is not null
order by constraint_name, ordinal_position"""
        def group_key(row: dict[str, Any]) -> tuple[str, str, str]:
            return row['CONSTRAINT_NAME'], row['TABLE_NAME'], row['REFERENCED_TABLE_NAME']
        rows = sorted(self._select(cmd), key=lambda row: (*group_key(row), row['ORDINAL_POSITION']))
        fkeys = []
        for (constraint_name, from_table, to_table), group in groupby(rows, key=group_key):
            if to_table.lower() != name.bare.lower():
                continue
            group = list(group)
            fkeys.append(ForeignKey(self, {
                'CONSTRAINT_NAME': constraint_name,
                'TABLE_NAME': name.prefix + from_table,
                'REFERENCED_TABLE_NAME': name.prefix + to_table,
                'COLUMN_NAMES': [row['COLUMN_NAME'] for row in group],
                'REFERENCED_COLUMN_NAMES': [row['REFERENCED_COLUMN_NAME'] for row in group],
                'DELETE_RULE': None,
                'UPDATE_RULE': None,
                }))
        return DataList(fkeys, ForeignKey, 'item.name', frozen=True)
    def get_relation_names(self, schema: str | None=None) -> list[str]:
        """Returns names of all tables *and* views in `schema` (or current database).
        """
        cmd = 'SHOW TABLES'
        if schema is not None:
            cmd += f' FROM {self.quote_identifier(schema)}'
        return [next(iter(row.values())) for row in self._select(cmd)]
    def get_views(self, schema: str | None=None) -> list[str]:
        """Returns names of views in `schema` (or current database).
        """
        return [row['TABLE_NAME'] for row
                in self._select(f"select TABLE_NAME from information_schema.views "
                                f"where table_schema = {self._schema_sql(schema)}")]
    def get_tables(self, schema: str | None=None) -> list[str]:
        """Returns names of base tables in `schema` (or current database).

        The catalog's table listing includes views, so names returned by
        `get_views()` are excluded from `get_relation_names()`.
        """
        views = set(self.get_views(schema))
        return [name for name in self.get_relation_names(schema) if name not in views]
    def get_view_definition(self, view_name: str) -> ViewDefinition | None:
        """Returns definition of view, or `None` if there is no such view.

        Qualification of objects by the view's own database (```shop`.``) is
        removed from the query text, as views are defined relative to the
        database they live in.

        Arguments:
            view_name: Possibly schema-qualified view name.
        """
        name = split_namespace(view_name)
        rows = self._select(f"""select VIEW_DEFINITION, CHECK_OPTION from information_schema.views
where table_schema = {schema_filter_sql(view_name, self.quote_literal)}
  and table_name = {self.quote_literal(name.bare)}""")
        if not rows:
            return None
        row = rows[0]
        select_text = row['VIEW_DEFINITION']
        if database := (name.schema or self.get_current_database()):
            select_text = select_text.replace(f'{self.quote_identifier(database)}.', '')
        return ViewDefinition(select_text, CheckOption((row['CHECK_OPTION'] or 'NONE').upper()))
    def get_indices(self, table_name: str) -> DataList[Index]:
        """Returns indices defined on `table_name`, including PRIMARY key index.

        Arguments:
            table_name: Possibly schema-qualified table name.

        Returns:
            Frozen `.DataList` of `Index` ordered by name, keyed by name.
        """
        cmd = f"""select INDEX_NAME, COLUMN_NAME, NON_UNIQUE, SEQ_IN_INDEX
from information_schema.statistics
where table_schema = {schema_filter_sql(table_name, self.quote_literal)}
  and table_name = {self.quote_literal(split_namespace(table_name).bare)}
order by index_name, seq_in_index"""
        rows = sorted(self._select(cmd), key=lambda row: (row['INDEX_NAME'], row['SEQ_IN_INDEX']))
        indices = []
        for index_name, group in groupby(rows, key=lambda row: row['INDEX_NAME']):
            group = list(group)
            indices.append(Index(self, {'INDEX_NAME': index_name,
                                        'TABLE_NAME': table_name,
                                        'COLUMN_NAMES': [row['COLUMN_NAME'] for row in group],
                                        'NON_UNIQUE': int(group[0]['NON_UNIQUE'])}))
        return DataList(indices, Index, 'item.name', frozen=True)
    def has_index(self, table_name: str, *, name: str | None=None,
                  columns: str | list[str] | None=None) -> bool:
        """Returns True if `table_name` has index with given name and/or columns.

        Arguments:
            table_name: Possibly schema-qualified table name.
            name: Index name (compared case-insensitively).
            columns: Column name or list of column names, in index order.

        Raises:
            ValueError: When neither `name` nor `columns` is specified.
        """
        if name is None and columns is None:
            raise ValueError("Index name or columns must be specified.")
        if isinstance(columns, str):
            columns = [columns]
        def match(index: Index) -> bool:
            if name is not None and index.name.lower() != name.lower():
                return False
            return columns is None or index.column_names == list(columns)
        return self.get_indices(table_name).find(match) is not None
    @property
    def closed(self) -> bool:
        """True if schema is not bound to connection."""
        return self._con is None
    @property
    def connection(self) -> Connection:
        """The bound connection."""
        self.__fail_if_closed()
        return self._con

class SchemaItem:
    """Abstract base class for objects representing elements of database schema.

    Instances hold raw attributes collected from catalog rows (or parsed DDL)
    and provide `get_sql_for()` to generate DDL for supported actions.
    Subclasses override `_get_name()` and implement `_get_<action>_sql()`
    methods for actions they register in `_actions`.

    Arguments:
        schema: The `Schema` this item belongs to, or `None` for unbound item.
        attributes: Dictionary of item attributes.
    """
    def __init__(self, schema: Schema | None, attributes: dict[str, Any]):
        #: Weak reference proxy to the `Schema` instance, or `None`.
        self.schema: Schema | None = None
        if schema is not None:
            self.schema = schema if isinstance(schema, weakref.ProxyType) else weakref.proxy(schema)
        #: Dictionary holding the item attributes.
        self._attributes: dict[str, Any] = dict(attributes)
        #: List of action names supported by `get_sql_for()`.
        self._actions: list[str] = []
    def __repr__(self):
        return f"{self.__class__.__name__}[{self.name}]"
    def _check_params(self, params: dict[str, Any], param_names: list[str]) -> None:
        """Internal helper: Validates keyword arguments passed to `get_sql_for`.

        Raises:
            ValueError: If `params` contains any key not found in `param_names`.
        """
        p = set(params.keys())
        n = set(param_names)
        if not p.issubset(n):
            raise ValueError(f"Unsupported parameter(s) '{','.join(p.difference(n))}'")
    def _get_name(self) -> str | None:
        return None
    def get_quoted_name(self) -> str:
        """Returns quoted item name."""
        return self.schema.quote_identifier(self.name)
    def get_sql_for(self, action: str, **params: dict) -> str:
        """Generates a DDL SQL command for a specified action on this item.

        Arguments:
            action: The desired SQL action (e.g. 'create', 'drop').
            **params: Keyword arguments specific to the requested `action`.

        Raises:
            ValueError: If the requested `action` is not supported for this object
                        type, or if invalid/missing `params` are provided for the action.
            Error: If item is not bound to `Schema`.
        """
        if (_action := action.lower()) not in self._actions:
            raise ValueError(f"Unsupported action '{action}'")
        if self.schema is None:
            raise Error(f"{self.__class__.__name__} '{self.name}' is not bound to schema.")
        return getattr(self, f'_get_{_action}_sql')(**params)
    @property
    def name(self) -> str | None:
        """The name of this schema item."""
        return self._get_name()
    @property
    def actions(self) -> list[str]:
        """List of action names supported by `get_sql_for()`."""
        return self._actions

class ForeignKey(SchemaItem):
    """Represents a FOREIGN KEY constraint.

    Instances are read models over catalog state, produced by
    `Schema.get_foreign_keys()` (with actions) and `Schema.get_reverse_foreign_keys()`
    (without actions). Table names are namespace-qualified when the table the
    constraint was looked up for is qualified.

    Supported SQL actions via `get_sql_for()`:

    *   `create` (optional keyword args: `table`: str, `name`: str): Generates
        ``ALTER TABLE ... ADD CONSTRAINT ... FOREIGN KEY ...``. The `table` and
        `name` override the owning table and constraint name.

    Arguments:
        schema: The parent `Schema` instance, or `None`.
        attributes: Dictionary with keys ``CONSTRAINT_NAME``, ``TABLE_NAME``,
                    ``REFERENCED_TABLE_NAME``, ``COLUMN_NAMES``,
                    ``REFERENCED_COLUMN_NAMES``, ``DELETE_RULE`` and ``UPDATE_RULE``.

    Raises:
        ValueError: If column lists are empty or differ in length.
    """
    def __init__(self, schema: Schema | None, attributes: dict[str, Any]):
        super().__init__(schema, attributes)
        self._attributes['COLUMN_NAMES'] = tuple(self._attributes['COLUMN_NAMES'])
        self._attributes['REFERENCED_COLUMN_NAMES'] = tuple(self._attributes['REFERENCED_COLUMN_NAMES'])
        if not self._attributes['COLUMN_NAMES'] or \
           len(self._attributes['COLUMN_NAMES']) != len(self._attributes['REFERENCED_COLUMN_NAMES']):
            raise ValueError(f"Foreign key '{self.name}' must have the same non-zero number "
                             "of columns and referenced columns")
        self._actions.append('create')
    def _get_create_sql(self, **params) -> str:
        """Generates the SQL command to ADD this constraint to its table.

        Arguments:
            **params: Accepts optional keyword arguments:

                      * `table` (str): Table to add the constraint to. Defaults to `table_name`.
                      * `name` (str): Constraint name. Defaults to `name`.

        Raises:
            ValueError: If unexpected parameters are passed.
        """
        self._check_params(params, ['table', 'name'])
        table = params.get('table', self.table_name)
        name = params.get('name', self.name)
        quote = self.schema.quote_identifier
        const_def = f'ALTER TABLE {self.schema.quote_table_name(table)} ADD CONSTRAINT {quote(name)}' \
                    f" FOREIGN KEY ({', '.join(quote(col) for col in self.column_names)})" \
                    f' REFERENCES {self.schema.quote_table_name(self.references_table_name)}' \
                    f" ({', '.join(quote(col) for col in self.references_column_names)})"
        if self.on_delete not in (None, ForeignKeyAction.RESTRICT):
            const_def += f' ON DELETE {self.on_delete.sql}'
        if self.on_update not in (None, ForeignKeyAction.RESTRICT):
            const_def += f' ON UPDATE {self.on_update.sql}'
        return const_def
    def _get_name(self) -> str:
        return self._attributes['CONSTRAINT_NAME']
    @property
    def table_name(self) -> str:
        """Name of the table this constraint is declared on (fromTable)."""
        return self._attributes['TABLE_NAME']
    @property
    def references_table_name(self) -> str:
        """Name of the referenced table (toTable)."""
        return self._attributes['REFERENCED_TABLE_NAME']
    @property
    def column_names(self) -> list[str]:
        """Referencing columns in constraint definition order."""
        return list(self._attributes['COLUMN_NAMES'])
    @property
    def references_column_names(self) -> list[str]:
        """Referenced columns, positionally matching `column_names`."""
        return list(self._attributes['REFERENCED_COLUMN_NAMES'])
    @property
    def on_delete(self) -> ForeignKeyAction | None:
        """``ON DELETE`` action, or `None` when not known."""
        return self._attributes['DELETE_RULE']
    @property
    def on_update(self) -> ForeignKeyAction | None:
        """``ON UPDATE`` action, or `None` when not known."""
        return self._attributes['UPDATE_RULE']

class Index(SchemaItem):
    """Represents a table index.

    Instances map rows of ``information_schema.statistics`` grouped by index
    name. They are typically accessed via `Schema.get_indices()`.

    Arguments:
        schema: The parent `Schema` instance.
        attributes: Dictionary with keys ``INDEX_NAME``, ``TABLE_NAME``,
                    ``COLUMN_NAMES`` and ``NON_UNIQUE``.
    """
    def _get_name(self) -> str:
        return self._attributes['INDEX_NAME']
    def is_unique(self) -> bool:
        """Returns True if index is UNIQUE."""
        return not self._attributes['NON_UNIQUE']
    def is_primary(self) -> bool:
        """Returns True if this is the PRIMARY key index."""
        return self.name == 'PRIMARY'
    @property
    def table_name(self) -> str:
        """Name of the indexed table."""
        return self._attributes['TABLE_NAME']
    @property
    def column_names(self) -> list[str]:
        """Indexed columns in index order."""
        return list(self._attributes['COLUMN_NAMES'])
