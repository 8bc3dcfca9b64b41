"""
Success-or-failure container for table operations.

Every table-producing operation answers with a Result:
  - success carries the new value (usually a DataTable)
  - failure carries the DataTableError that stopped it
  - nothing is raised across the boundary for library errors
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Optional

from .errors import DataTableError


@dataclass(frozen=True)
class Result:
    """
    Outcome of a fallible operation.

    Attributes
    ----------
    error : DataTableError or None
        The failure, or None on success

    Notes
    -----
    - Build instances via ``Result.success`` / ``Result.failure`` / ``Result.of``
    - ``value`` re-raises the stored error when read on a failure

    Examples
    --------
    >>> Result.success(3).map(lambda x: x + 1).value
    4
    >>> Result.failure(DataTableError("boom")).is_failure
    True
    """

    _value: Any = None
    error: Optional[DataTableError] = None

    def __repr__(self):
        if self.error is not None:
            return f"Failure({self.error!r})"
        return f"Success({self._value!r})"

    @classmethod
    def success(cls, value: Any) -> "Result":
        return cls(_value=value)

    @classmethod
    def failure(cls, error: DataTableError) -> "Result":
        if not isinstance(error, DataTableError):
            raise TypeError(f"Result.failure expects a DataTableError, got {type(error).__name__}")
        return cls(error=error)

    @classmethod
    def of(cls, fn: Callable[..., Any], *args: Any) -> "Result":
        """
        Call ``fn(*args)`` and capture library errors as a failure.

        Exceptions outside the DataTableError hierarchy propagate.
        """
        try:
            return cls.success(fn(*args))
        except DataTableError as e:
            return cls.failure(e)

    @classmethod
    def sequence(cls, results: Iterable["Result"]) -> "Result":
        """
        Turn an iterable of Results into a Result of a tuple.

        Fail-fast: consumption stops at the first failure, so a lazy
        iterable never evaluates the items after it.
        """
        values = []
        for r in results:
            if r.is_failure:
                return r
            values.append(r._value)
        return cls.success(tuple(values))

    @property
    def is_success(self) -> bool:
        return self.error is None

    @property
    def is_failure(self) -> bool:
        return self.error is not None

    @property
    def value(self) -> Any:
        if self.error is not None:
            raise self.error
        return self._value

    def unwrap(self) -> Any:
        """Return the success value or raise the stored error."""
        return self.value

    def bind(self, fn: Callable[[Any], "Result"]) -> "Result":
        """Chain another fallible step; failures pass through untouched."""
        if self.error is not None:
            return self
        return fn(self._value)

    def map(self, fn: Callable[[Any], Any]) -> "Result":
        if self.error is not None:
            return self
        return Result.success(fn(self._value))
