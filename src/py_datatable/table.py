import logging

from .column import DataColumn
from .display import repr_table
from .errors import DataTableIndexError, DataTableKeyError, DataTableTypeError
from .errors import DuplicateColumnError, TableBuildError
from .naming import build_column_map
from .result import Result
from .row import DataRow

logger = logging.getLogger(__name__)


def _missing_col_error(name, context="DataTable"):
	return DataTableKeyError(f"Column '{name}' not found in {context}")


def _is_position(index):
	return isinstance(index, int) and not isinstance(index, bool)


class DataTable:
	""" Named, immutable collection of equal-length columns.

	The constructor enforces unique column names and equal lengths; use
	DataTable.build to get those failures back as a Result instead.
	"""

	def __init__(self, name, columns):
		columns = tuple(columns)
		self._check_columns(name, columns)
		self._name = name
		self._columns = columns
		self._column_map = build_column_map(col.name for col in self._columns)
		self._rows = None

	@staticmethod
	def _check_columns(name, columns):
		seen = set()
		for col in columns:
			if not isinstance(col, DataColumn):
				raise DataTableTypeError(f"Expected DataColumn, got {type(col).__name__}")
			if not isinstance(col.name, str):
				raise TableBuildError(f"Column names must be strings, got {col.name!r}")
			if col.name in seen:
				raise DuplicateColumnError(f"Duplicate column name '{col.name}' in table '{name}'")
			seen.add(col.name)

		lengths = {len(col) for col in columns}
		if len(lengths) > 1:
			raise TableBuildError(
				f"Columns in table '{name}' must have equal length, got {sorted(lengths)}")

	@classmethod
	def build(cls, name, columns=()):
		"""Validate `columns` and wrap them in a new table.

		Returns a Result: success carries the DataTable, failure carries the
		DuplicateColumnError / TableBuildError that rejected the columns.
		"""
		result = Result.of(cls, name, columns)
		if result.is_failure:
			logger.debug("build of table %r failed: %s", name, result.error)
		return result

	@classmethod
	def from_dict(cls, name, data, dtypes=None):
		"""Build from {column_name: values}; raises on invalid input."""
		dtypes = dtypes or {}
		columns = [DataColumn(col_name, values, dtype=dtypes.get(col_name))
			for col_name, values in data.items()]
		return cls.build(name, columns).unwrap()

	#-----------------------------------------------------
	# Shape and columns
	#-----------------------------------------------------

	@property
	def name(self):
		return self._name

	@property
	def columns(self):
		return self._columns

	@property
	def column_names(self):
		return tuple(col.name for col in self._columns)

	@property
	def column_count(self):
		return len(self._columns)

	@property
	def row_count(self):
		if not self._columns:
			return 0
		return len(self._columns[0])

	def __len__(self):
		return self.row_count

	def column(self, index):
		"""Column at position `index`."""
		if not _is_position(index) or not 0 <= index < len(self._columns):
			raise DataTableIndexError(
				f"Column index {index!r} out of range for table with {len(self._columns)} columns")
		return self._columns[index]

	def column_index(self, name):
		"""Position of the column called `name` (exact, then sanitized match)."""
		for idx, col in enumerate(self._columns):
			if col.name == name:
				return idx
		idx = self._column_map.get(name.lower())
		if idx is None:
			raise _missing_col_error(name)
		return idx

	def __getitem__(self, key):
		if isinstance(key, str):
			return self._columns[self.column_index(key)]
		if _is_position(key):
			return self.row(key)
		raise DataTableTypeError(f"Table indices must be int or str, not {type(key).__name__}")

	def __dir__(self):
		"""Include sanitized column names."""
		return sorted(set(object.__dir__(self)) | set(self._column_map))

	def __getattr__(self, attr):
		"""Access columns by sanitized attribute name."""
		if attr.startswith('_'):
			raise AttributeError(attr)
		col_idx = self._column_map.get(attr.lower())
		if col_idx is not None:
			return self._columns[col_idx]
		raise AttributeError(f"{self.__class__.__name__!s} object has no attribute '{attr}'")

	#-----------------------------------------------------
	# Rows
	#-----------------------------------------------------

	def row(self, index):
		"""Row view at `index`; negative values count from the end."""
		n = self.row_count
		if _is_position(index) and index < 0:
			index += n
		if not _is_position(index) or not 0 <= index < n:
			raise DataTableIndexError(f"Row index {index!r} out of range for table with {n} rows")
		return DataRow(self, index)

	@property
	def rows(self):
		"""Row collection for this table; mutations on it return new tables."""
		if self._rows is None:
			from .rows import DataRowCollectionModifiable
			self._rows = DataRowCollectionModifiable.build(self)
		return self._rows

	def __iter__(self):
		"""Iterate over row views."""
		return iter(self.rows)

	def to_dict(self):
		return {col.name: list(col.values) for col in self._columns}

	def __repr__(self):
		return repr_table(self)
