"""Text rendering for DataTable.__repr__."""

from __future__ import annotations
from datetime import date
from typing import List

from .naming import build_column_map


# How many rows/columns to show on each side before inserting "..."
MAX_HEAD_ROWS = 5
MAX_HEAD_COLS = 5

_ELLIPSIS = "..."
_RIGHT_ALIGNED = ('int', 'float', 'complex')


def _needs_quoting(name: str) -> bool:
	"""A name needs quoting if it has anything outside [A-Za-z0-9_] or
	leading/trailing whitespace."""
	if not name:
		return False
	if name != name.strip():
		return True
	return not all(c.isalnum() or c == "_" for c in name)


def _format_value(v, kind) -> str:
	if v is None:
		return "None"
	if kind is float:
		return f"{v:.1f}" if v.is_integer() else f"{v:g}"
	if kind is str:
		return repr(v)
	if isinstance(v, date):
		return v.isoformat()
	return str(v)


def _format_column(col, max_preview: int = MAX_HEAD_ROWS) -> List[str]:
	"""Cells of one column, truncated symmetrically."""
	vals = col.values
	kind = col.dtype.kind
	if len(vals) > max_preview * 2:
		head = [_format_value(v, kind) for v in vals[:max_preview]]
		tail = [_format_value(v, kind) for v in vals[-max_preview:]]
		return head + [_ELLIPSIS] + tail
	return [_format_value(v, kind) for v in vals]


def _header(name) -> str:
	if name is None:
		return ""
	name = str(name)
	return repr(name) if _needs_quoting(name) else name


def _pad(cells, width, kind_name):
	if kind_name in _RIGHT_ALIGNED:
		return [s.rjust(width) for s in cells]
	return [s.ljust(width) for s in cells]


def _footer(tbl, kind_names) -> str:
	dtypes = ", ".join(kind_names)
	label = f"{tbl.name}: " if tbl.name else ""
	return f"# {label}{tbl.row_count}×{tbl.column_count} table <{dtypes}>"


def repr_table(tbl) -> str:
	"""Pretty repr for a DataTable."""
	cols = tbl.columns
	num_cols = len(cols)
	if num_cols == 0:
		label = f"{tbl.name}: " if tbl.name else ""
		return f"# {label}0×0 table"

	truncated = num_cols > MAX_HEAD_COLS * 2
	if truncated:
		col_indices = list(range(MAX_HEAD_COLS)) + list(range(num_cols - MAX_HEAD_COLS, num_cols))
	else:
		col_indices = list(range(num_cols))

	kind_names = [col.dtype.kind.__name__ for col in cols]

	blocks = []
	for idx in col_indices:
		col = cols[idx]
		head = _header(col.name)
		body = _format_column(col)
		width = max([len(head)] + [len(s) for s in body])
		kind_name = kind_names[idx]
		blocks.append((_pad([head], width, kind_name)[0], _pad(body, width, kind_name)))

	if truncated:
		nrows = len(blocks[0][1])
		blocks.insert(MAX_HEAD_COLS, (_ELLIPSIS, [_ELLIPSIS] * nrows))

	lines = ["  ".join(h for h, _ in blocks)]
	nrows = len(blocks[0][1])
	for r in range(nrows):
		lines.append("  ".join(body[r] for _, body in blocks))

	# Show the attribute names when they differ from the display names
	column_map = build_column_map(tbl.column_names)
	if any(_header(cols[i].name) != san for san, i in column_map.items()):
		lines.append("# attrs: " + ", ".join("." + san for san in column_map))

	lines.append("")
	if truncated:
		shown = kind_names[:MAX_HEAD_COLS] + [_ELLIPSIS] + kind_names[-MAX_HEAD_COLS:]
		lines.append(_footer(tbl, shown))
	else:
		lines.append(_footer(tbl, kind_names))
	return "\n".join(lines)
