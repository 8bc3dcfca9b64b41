"""Attribute-style names for table columns (``table.home_town``, ``row.age``)."""

from __future__ import annotations
from itertools import count
import re

_NON_IDENT = re.compile(r'[^a-z0-9_]+')


def attribute_name(name) -> str | None:
	"""Lowercase identifier for a column name, or None if nothing survives.

	>>> attribute_name('Home Town')
	'home_town'
	>>> attribute_name('2nd place!')
	'c2nd_place'
	"""
	ident = _NON_IDENT.sub('_', str(name).lower()).strip('_')
	if not ident:
		return None
	return f"c{ident}" if ident[0].isdigit() else ident


def _first_free(base: str, taken) -> str:
	# base, base__2, base__3, ...
	if base not in taken:
		return base
	return next(f"{base}__{n}" for n in count(2) if f"{base}__{n}" not in taken)


def build_column_map(names) -> dict[str, int]:
	"""Map attribute names to column positions.

	Repeated names get ``__2``, ``__3`` suffixes in column order; a name
	with no identifier characters is reachable as ``col{idx}_``.
	"""
	column_map = {}
	for idx, name in enumerate(names):
		ident = attribute_name(name)
		key = f'col{idx}_' if ident is None else _first_free(ident, column_map.keys())
		column_map[key] = idx
	return column_map
