"""DataColumn creation and single-element operations."""
import pytest
from datetime import date, datetime
from enum import IntEnum
from py_datatable import DataColumn, DataType
from py_datatable.errors import ColumnIndexError, ColumnTypeError


class TestCreation:

    @pytest.mark.parametrize("values,expected_kind", [
        ([1, 2, 3], int),
        ([1.5, 2], float),
        (['a', 'b'], str),
        ([date(2024, 1, 1)], date),
        ([], object),
    ])
    def test_infers_dtype(self, values, expected_kind):
        col = DataColumn('c', values)
        assert col.dtype.kind is expected_kind
        assert len(col) == len(values)

    def test_explicit_dtype_as_type(self):
        col = DataColumn('x', [1, 2], dtype=float)
        assert col.dtype == DataType(float)
        assert col.values == (1.0, 2.0)

    def test_explicit_dtype_rejects_values(self):
        with pytest.raises(ColumnTypeError, match="Column 'x'"):
            DataColumn('x', ['a'], dtype=int)

    def test_none_requires_nullable(self):
        with pytest.raises(ColumnTypeError, match="non-nullable"):
            DataColumn('x', [None], dtype=int)
        col = DataColumn('x', [1, None])
        assert col.dtype == DataType(int, nullable=True)

    def test_bad_dtype_spec(self):
        with pytest.raises(TypeError):
            DataColumn('x', [1], dtype='int')

    def test_protocols(self):
        col = DataColumn('x', [1, 2, 3])
        assert list(col) == [1, 2, 3]
        assert col[1] == 2
        assert col == DataColumn('x', (1, 2, 3))
        assert col != DataColumn('y', (1, 2, 3))
        assert repr(col) == "DataColumn('x', [1, 2, 3], dtype=<int>)"

    def test_unhashable(self):
        with pytest.raises(TypeError):
            hash(DataColumn('x', [1]))


class Level(IntEnum):
    LOW = 1
    HIGH = 2


class Tag(str):
    pass


class TestSubclassValues:
    """Values whose type subclasses the column kind are stored unchanged."""

    def test_intenum_members(self):
        col = DataColumn('lvl', [Level.LOW, Level.HIGH])
        assert col.dtype == DataType(int)
        assert col.values == (Level.LOW, Level.HIGH)
        assert col.values[0] is Level.LOW
        assert col.add(3).values[-1] == 3

    def test_str_subclass(self):
        col = DataColumn('tag', [Tag('x'), 'y'])
        assert col.dtype == DataType(str)
        assert type(col.values[0]) is Tag

    def test_intenum_into_float_column(self):
        col = DataColumn('v', [0.5]).add(Level.HIGH)
        assert col.values == (0.5, 2.0)
        assert type(col.values[1]) is float

    def test_bool_still_coerced_in_int_column(self):
        value = DataColumn('n', [1]).add(True).values[-1]
        assert value == 1
        assert type(value) is int


class TestOperations:
    """Every operation returns a fresh column and leaves the receiver alone."""

    def test_add(self):
        col = DataColumn('x', [1, 2])
        new = col.add(3)
        assert new.values == (1, 2, 3)
        assert col.values == (1, 2)
        assert new is not col
        assert new.name == 'x'
        assert new.dtype is col.dtype

    def test_add_wrong_type(self):
        with pytest.raises(ColumnTypeError, match="Incompatible value 'a'"):
            DataColumn('x', [1]).add('a')

    def test_add_coerces(self):
        col = DataColumn('when', [datetime(2024, 1, 1, 12)])
        assert col.add(date(2024, 1, 2)).values[-1] == datetime(2024, 1, 2)

    @pytest.mark.parametrize("index,expected", [
        (0, (9, 1, 2)),
        (1, (1, 9, 2)),
        (2, (1, 2, 9)),
    ])
    def test_insert(self, index, expected):
        assert DataColumn('x', [1, 2]).insert(index, 9).values == expected

    @pytest.mark.parametrize("index", [-1, 3])
    def test_insert_out_of_range(self, index):
        with pytest.raises(ColumnIndexError, match="out of range"):
            DataColumn('x', [1, 2]).insert(index, 9)

    def test_insert_into_empty(self):
        assert DataColumn('x', [], dtype=int).insert(0, 5).values == (5,)

    def test_replace(self):
        col = DataColumn('x', [1, 2, 3])
        assert col.replace(1, 9).values == (1, 9, 3)
        assert col.values == (1, 2, 3)

    @pytest.mark.parametrize("index", [-1, 3])
    def test_replace_out_of_range(self, index):
        with pytest.raises(ColumnIndexError):
            DataColumn('x', [1, 2, 3]).replace(index, 9)

    def test_replace_wrong_type(self):
        with pytest.raises(ColumnTypeError):
            DataColumn('x', [1]).replace(0, 'a')

    def test_remove(self):
        assert DataColumn('x', [1, 2, 3]).remove(0).values == (2, 3)

    @pytest.mark.parametrize("index", [-1, 1])
    def test_remove_out_of_range(self, index):
        with pytest.raises(ColumnIndexError):
            DataColumn('x', [1]).remove(index)

    def test_non_int_index(self):
        with pytest.raises(ColumnIndexError, match="index must be int"):
            DataColumn('x', [1]).remove('0')
        with pytest.raises(ColumnIndexError):
            DataColumn('x', [1]).remove(True)


def test_repr_after_rejected_value():
    col = object.__new__(DataColumn)
    with pytest.raises(ColumnTypeError):
        col.__init__('x', ['a'], dtype=int)
    assert repr(col) == "DataColumn('x', [], dtype=<int>)"
