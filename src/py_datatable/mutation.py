"""
Row-level mutations over immutable tables.

Each operation pairs a row's values with the table's columns by position,
runs the matching single-element operation on every column, and rebuilds a
table from the new columns. The first column failure aborts the operation;
callers get either a fresh DataTable or the error, never a partial table.
"""

from __future__ import annotations
import logging
from collections.abc import Mapping
from typing import Any, Callable, Iterable, NamedTuple

from .column import DataColumn
from .errors import ArityError, DataTableTypeError
from .result import Result

logger = logging.getLogger(__name__)


class ColumnValuePair(NamedTuple):
	"""A column and the candidate value for it in one row."""
	column: DataColumn
	value: Any


def map_values_to_columns(table, values: Iterable[Any]) -> Result:
	"""
	Pair each value with the column at the same position.

	Fails with ArityError unless there is exactly one value per column.
	A str, bytes or mapping is not a row and fails with DataTableTypeError.
	"""
	if isinstance(values, (str, bytes, bytearray, Mapping)):
		return Result.failure(DataTableTypeError(
			f"Row values must be a sequence of values, not {type(values).__name__}"))
	values = tuple(values)
	expected = table.column_count
	if len(values) != expected:
		return Result.failure(ArityError(expected, len(values)))
	return Result.success(tuple(
		ColumnValuePair(table.column(idx), value) for idx, value in enumerate(values)
	))


def _apply(items, op: Callable[[Any], DataColumn]) -> Result:
	# Generator keeps Result.sequence lazy: no column runs after a failure
	return Result.sequence(Result.of(op, item) for item in items)


def _build_table(table, columns: Result) -> Result:
	return columns.bind(lambda cols: type(table).build(table.name, cols))


def _logged(op_name, table, result: Result, index=None) -> Result:
	if result.is_failure:
		logger.debug("%s on table %r (index=%s) failed: %s", op_name, table.name, index, result.error)
	else:
		logger.debug("%s on table %r (index=%s) -> %d rows", op_name, table.name, index, result.value.row_count)
	return result


#-----------------------------------------------------
# Public operations
#-----------------------------------------------------

def append(table, values: Iterable[Any]) -> Result:
	"""Return a new table with `values` appended as the last row."""
	result = map_values_to_columns(table, values).bind(
		lambda pairs: _build_table(table, _apply(pairs, lambda p: p.column.add(p.value)))
	)
	return _logged("append", table, result)


def insert(table, index: int, values: Iterable[Any]) -> Result:
	"""Return a new table with `values` inserted as row `index`.

	The index is checked by each column, so an out-of-range index fails
	with the first column's ColumnIndexError.
	"""
	result = map_values_to_columns(table, values).bind(
		lambda pairs: _build_table(table, _apply(pairs, lambda p: p.column.insert(index, p.value)))
	)
	return _logged("insert", table, result, index)


def replace(table, index: int, values: Iterable[Any]) -> Result:
	"""Return a new table with row `index` replaced by `values`."""
	result = map_values_to_columns(table, values).bind(
		lambda pairs: _build_table(table, _apply(pairs, lambda p: p.column.replace(index, p.value)))
	)
	return _logged("replace", table, result, index)


def remove(table, index: int) -> Result:
	"""Return a new table without row `index`."""
	result = _build_table(table, _apply(table.columns, lambda col: col.remove(index)))
	return _logged("remove", table, result, index)
