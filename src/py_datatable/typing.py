"""
Column value types.

A DataType is pure metadata:
  - `kind` is the Python type stored in the column
  - `nullable` says whether None is allowed
  - promotion and coercion never mutate, they return new values
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Iterable, Optional, Type
import warnings


_NUMERIC = (bool, int, float, complex)
_TEMPORAL = (date, datetime)


def _is_kind(value, kind) -> bool:
    """isinstance, except a bool only ever counts as a bool."""
    if isinstance(value, bool) and kind is not bool:
        return False
    return isinstance(value, kind)


@dataclass(frozen=True)
class DataType:
    """
    Declared type of a DataColumn.

    Attributes
    ----------
    kind : Type
        Python type (int, float, str, date, ...)
    nullable : bool
        Whether the column may hold None

    Examples
    --------
    >>> DataType(int)
    <int>
    >>> DataType(str, nullable=True)
    <str nullable>
    >>> DataType(int).promote_with(2.5)
    <float>
    """

    kind: Type[Any]
    nullable: bool = False

    def __repr__(self):
        if self.nullable:
            return f"<{self.kind.__name__} nullable>"
        return f"<{self.kind.__name__}>"

    @classmethod
    def coerce_spec(cls, spec) -> "DataType":
        """Accept either a DataType or a bare Python type."""
        if isinstance(spec, DataType):
            return spec
        if isinstance(spec, type):
            return cls(spec)
        raise TypeError(f"dtype must be a DataType or a type, not {type(spec).__name__}")

    @property
    def is_numeric(self) -> bool:
        try:
            return issubclass(self.kind, _NUMERIC)
        except TypeError:
            return False

    @property
    def is_temporal(self) -> bool:
        try:
            return issubclass(self.kind, _TEMPORAL)
        except TypeError:
            return False

    def with_nullable(self, nullable: bool) -> "DataType":
        if nullable == self.nullable:
            return self
        return DataType(self.kind, nullable)

    def promote_with(self, value: Any) -> "DataType":
        """
        Widen this type just enough to hold `value`.

        None lifts nullability. Numbers climb bool -> int -> float -> complex,
        dates climb date -> datetime. Anything else degrades to object.
        """
        if value is None:
            return self.with_nullable(True)

        vtype = type(value)
        if vtype is self.kind or self.kind is object:
            return self

        vkind = infer_kind(value)
        if self.is_numeric and isinstance(value, _NUMERIC):
            for kind in (complex, float, int, bool):
                if self.kind is kind or vkind is kind:
                    return DataType(kind, self.nullable)

        if self.is_temporal and isinstance(value, _TEMPORAL):
            if self.kind is datetime or vkind is datetime:
                return DataType(datetime, self.nullable)
            return DataType(date, self.nullable)

        if _is_kind(value, self.kind):
            return self

        warnings.warn(
            f"Degrading column<{self.kind.__name__}> to column<object> "
            f"due to incompatible value of type {vtype.__name__}",
            stacklevel=3,
        )
        return DataType(object, self.nullable)


def infer_kind(value: Any) -> Optional[Type]:
    """Python type for a single scalar, or None for None."""
    if value is None:
        return None
    # bool before int, datetime before date: subclass order matters
    for kind in (bool, int, float, complex, str, bytes, datetime, date, list, dict, tuple):
        if isinstance(value, kind):
            return kind
    return object


def infer_dtype(values: Iterable[Any]) -> DataType:
    """
    Infer a DataType from an iterable of scalars.

    Examples
    --------
    >>> infer_dtype([1, 2, 3])
    <int>
    >>> infer_dtype([None, 1])
    <int nullable>
    >>> infer_dtype([])
    <object nullable>
    """
    dtype: Optional[DataType] = None
    saw_none = False
    for v in values:
        if v is None:
            saw_none = True
        elif dtype is None:
            dtype = DataType(infer_kind(v))
        else:
            dtype = dtype.promote_with(v)

    if dtype is None:
        return DataType(object, nullable=True)
    return dtype.with_nullable(True) if saw_none else dtype


def validate_scalar(value: Any, dtype: DataType) -> Any:
    """
    Check `value` against `dtype`, returning it (possibly coerced).

    Raises
    ------
    TypeError
        If the value cannot be stored under `dtype`
    """
    if value is None:
        if not dtype.nullable:
            raise TypeError(f"Cannot store None in non-nullable {dtype.kind.__name__} column")
        return None

    vtype = type(value)
    # Subclasses (IntEnum members, str subclasses) are stored as they are
    if dtype.kind is object or _is_kind(value, dtype.kind):
        return value

    # Lossless widenings only
    if dtype.kind is float and isinstance(value, int):
        return float(value)
    if dtype.kind is int and isinstance(value, bool):
        return int(value)
    if dtype.kind is complex and isinstance(value, (int, float)):
        return complex(value)
    if dtype.kind is datetime and vtype is date:
        return datetime.combine(value, datetime.min.time())

    raise TypeError(f"Incompatible value {value!r} for column<{dtype.kind.__name__}>")
