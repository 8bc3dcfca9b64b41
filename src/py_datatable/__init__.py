"""
py-datatable: immutable, column-oriented tables

Tables hold a fixed, ordered set of named, typed columns; rows are views
computed across them. Adding, inserting, replacing or removing a row never
touches an existing table: it returns a Result carrying a new one.

Main classes:
    - DataTable: named collection of equal-length DataColumns
    - DataColumn: immutable typed sequence of values
    - DataRow: view of one row
    - DataRowCollectionModifiable: row mutation entry points (table.rows)
    - Result: success-or-failure outcome of every mutation

Zero external dependencies - pure Python stdlib only.
"""

import logging

from .column import DataColumn
from .errors import (
	ArityError,
	ColumnIndexError,
	ColumnTypeError,
	DataTableError,
	DataTableIndexError,
	DataTableKeyError,
	DataTableTypeError,
	DataTableValueError,
	DuplicateColumnError,
	TableBuildError,
)
from .result import Result
from .row import DataRow
from .rows import DataRowCollection, DataRowCollectionModifiable
from .table import DataTable
from .typing import DataType

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"
__all__ = [
	"DataTable",
	"DataColumn",
	"DataRow",
	"DataRowCollection",
	"DataRowCollectionModifiable",
	"DataType",
	"Result",
	"DataTableError",
	"DataTableKeyError",
	"DataTableTypeError",
	"DataTableValueError",
	"DataTableIndexError",
	"ArityError",
	"ColumnTypeError",
	"ColumnIndexError",
	"TableBuildError",
	"DuplicateColumnError",
]
