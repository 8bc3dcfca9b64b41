from . import mutation
from .row import DataRow


class DataRowCollection:
	"""Materialized row views over one table."""
	__slots__ = ('_table', '_rows', '_row_count')

	def __init__(self, table, rows):
		self._table = table
		self._rows = tuple(rows)
		self._row_count = len(self._rows)

	@classmethod
	def build(cls, table, rows=None):
		"""Wrap `table`; derive one DataRow per index unless `rows` is given."""
		if rows is None:
			rows = (DataRow(table, idx) for idx in range(table.row_count))
		return cls(table, rows)

	@property
	def table(self):
		return self._table

	@property
	def row_count(self):
		return self._row_count

	def __len__(self):
		return self._row_count

	def __iter__(self):
		return iter(self._rows)

	def __getitem__(self, key):
		return self._rows[key]

	def __eq__(self, other):
		if isinstance(other, DataRowCollection):
			other = other._rows
		if not isinstance(other, (tuple, list)):
			return NotImplemented
		return len(self._rows) == len(other) and all(a == b for a, b in zip(self._rows, other))

	__hash__ = None

	def to_tuples(self):
		return [row.values for row in self._rows]

	def __repr__(self):
		return f"{self.__class__.__name__}({self._table.name!r}, {self._row_count} rows)"


class DataRowCollectionModifiable(DataRowCollection):
	"""Row collection exposing add / insert / replace / remove.

	Every method returns a Result carrying a new DataTable; the wrapped table
	and this collection are left as they were. Read ``result.value.rows`` for
	the collection of the new table.
	"""
	__slots__ = ()

	def add(self, values):
		return mutation.append(self._table, values)

	def add_values(self, *values):
		return self.add(values)

	def insert(self, index, values):
		return mutation.insert(self._table, index, values)

	def insert_values(self, index, *values):
		return self.insert(index, values)

	def replace(self, index, values):
		return mutation.replace(self._table, index, values)

	def replace_values(self, index, *values):
		return self.replace(index, values)

	def remove(self, index):
		return mutation.remove(self._table, index)
