class DataRow:
	"""Read-only view of one row across a table's columns."""
	__slots__ = ('_table', '_cols', '_column_map', '_index')

	def __init__(self, table, index):
		# Direct handles to the column tuples (bypasses DataColumn dispatch)
		self._table = table
		self._cols = [col.values for col in table.columns]
		self._column_map = table._column_map
		self._index = index

	@property
	def table(self):
		return self._table

	@property
	def index(self):
		return self._index

	@property
	def values(self) -> tuple:
		idx = self._index
		return tuple(col[idx] for col in self._cols)

	def __getattr__(self, attr):
		"""Access column values by sanitized attribute name."""
		if attr.startswith('_'):
			raise AttributeError(attr)
		col_idx = self._column_map.get(attr.lower())
		if col_idx is None:
			raise AttributeError(f"Row has no attribute '{attr}'")
		return self._cols[col_idx][self._index]

	def __getitem__(self, key):
		"""Access column values by position or by column name."""
		if isinstance(key, str):
			return self._cols[self._table.column_index(key)][self._index]
		if isinstance(key, slice):
			return self.values[key]
		if isinstance(key, bool):
			raise TypeError("Row indices must be int or str, not bool")
		try:
			return self._cols[key][self._index]
		except TypeError:
			raise TypeError(f"Row indices must be int or str, not {type(key).__name__}") from None

	def __iter__(self):
		idx = self._index
		for col in self._cols:
			yield col[idx]

	def __len__(self):
		"""Number of columns."""
		return len(self._cols)

	def __eq__(self, other):
		if isinstance(other, DataRow):
			return self.values == other.values
		if isinstance(other, (tuple, list)):
			return self.values == tuple(other)
		return NotImplemented

	__hash__ = None

	def __repr__(self):
		idx = self._index
		values = [repr(col[idx]) for col in self._cols]
		return f"Row({idx}: {', '.join(values)})"
