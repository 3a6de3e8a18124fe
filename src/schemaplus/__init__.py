# SPDX-FileCopyrightText: 2025-present The schemaplus Project
#
# SPDX-License-Identifier: MIT
#
# PROGRAM/MODULE: schemaplus
# FILE:           schemaplus/__init__.py
# DESCRIPTION:    Package initialization
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

"""schemaplus - Foreign key aware schema introspection and DDL for MySQL.
"""

from .connection import Connection, connect
from .ddl import CascadingStatements, SchemaStatements
from .schema import CheckOption, ForeignKey, ForeignKeyAction, Index, Schema, ViewDefinition, parse_foreign_keys

__version__ = "0.1.0"
