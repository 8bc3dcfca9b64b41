from __future__ import annotations

from typing import Any, Iterable

from .errors import ColumnIndexError, ColumnTypeError
from .typing import DataType, infer_dtype, validate_scalar


class DataColumn:
	"""Immutable, named, typed sequence of values.

	Every operation returns a new DataColumn; the receiver is never touched.
	Index checks are strict: negative positions are out of range.
	"""
	__slots__ = ('_name', '_dtype', '_data')

	def __init__(self, name, values: Iterable[Any] = (), dtype=None):
		values = tuple(values)
		if dtype is None:
			dtype = infer_dtype(values)
		else:
			dtype = DataType.coerce_spec(dtype)
		self._name = name
		self._dtype = dtype
		self._data = ()  # keeps repr working if a value is rejected below
		self._data = tuple(self._validate(v) for v in values)

	@classmethod
	def _from_trusted(cls, name, dtype, data):
		# Skips validation: `data` was produced from already-checked values
		col = object.__new__(cls)
		col._name = name
		col._dtype = dtype
		col._data = data
		return col

	@property
	def name(self):
		return self._name

	@property
	def dtype(self) -> DataType:
		return self._dtype

	@property
	def values(self) -> tuple:
		return self._data

	def __len__(self):
		return len(self._data)

	def __iter__(self):
		return iter(self._data)

	def __getitem__(self, index):
		return self._data[index]

	def __eq__(self, other):
		if not isinstance(other, DataColumn):
			return NotImplemented
		return (self._name == other._name
			and self._dtype == other._dtype
			and self._data == other._data)

	__hash__ = None

	def __repr__(self):
		return f"DataColumn({self._name!r}, {list(self._data)!r}, dtype={self._dtype!r})"

	def _validate(self, value):
		try:
			return validate_scalar(value, self._dtype)
		except TypeError as e:
			raise ColumnTypeError(f"Column '{self._name}': {e}") from e

	def _check_index(self, index, upper):
		if not isinstance(index, int) or isinstance(index, bool):
			raise ColumnIndexError(
				f"Column '{self._name}': index must be int, not {type(index).__name__}")
		if index < 0 or index > upper:
			raise ColumnIndexError(
				f"Column '{self._name}': index {index} out of range for length {len(self._data)}")

	def _with_data(self, data):
		return DataColumn._from_trusted(self._name, self._dtype, data)

	#-----------------------------------------------------
	# Single-element operations
	#-----------------------------------------------------

	def add(self, value) -> DataColumn:
		"""Return a new column with `value` appended."""
		return self._with_data(self._data + (self._validate(value),))

	def insert(self, index, value) -> DataColumn:
		"""Return a new column with `value` at `index` (0..len inclusive)."""
		self._check_index(index, len(self._data))
		value = self._validate(value)
		return self._with_data(self._data[:index] + (value,) + self._data[index:])

	def replace(self, index, value) -> DataColumn:
		"""Return a new column with the value at `index` swapped for `value`."""
		self._check_index(index, len(self._data) - 1)
		value = self._validate(value)
		return self._with_data(self._data[:index] + (value,) + self._data[index + 1:])

	def remove(self, index) -> DataColumn:
		"""Return a new column without the value at `index`."""
		self._check_index(index, len(self._data) - 1)
		return self._with_data(self._data[:index] + self._data[index + 1:])
