class DataTableError(Exception):
    """Base exception for py-datatable library."""
    pass


class DataTableKeyError(DataTableError, KeyError):
    """Raised when a column name is missing."""
    pass


class DataTableTypeError(DataTableError, TypeError):
    """Raised for invalid types in API calls."""
    pass


class DataTableValueError(DataTableError, ValueError):
    """Raised for invalid values or mismatched lengths."""
    pass


class DataTableIndexError(DataTableError, IndexError):
    """Raised for invalid indexing operations."""
    pass


class ArityError(DataTableValueError):
    """Raised when a row does not supply exactly one value per column."""

    def __init__(self, expected, actual):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Number of values does not match number of columns: "
            f"expected {expected}, got {actual}"
        )


class ColumnTypeError(DataTableTypeError):
    """Raised when a column rejects a value."""
    pass


class ColumnIndexError(DataTableIndexError):
    """Raised when a column operation addresses a missing position."""
    pass


class TableBuildError(DataTableValueError):
    """Raised when columns cannot form a table."""
    pass


class DuplicateColumnError(TableBuildError):
    """Raised when two columns share a name."""
    pass
