import pytest
from py_datatable import DataTable
from py_datatable.errors import DataTableKeyError


@pytest.fixture
def row():
    t = DataTable.from_dict('people', {'Name': ['Alice', 'Bob'], 'Home Town': ['Oslo', 'Rome']})
    return t.row(1)


def test_access_by_position(row):
    assert row[0] == 'Bob'
    assert row[-1] == 'Rome'


def test_access_by_name(row):
    assert row['Name'] == 'Bob'
    assert row['home_town'] == 'Rome'
    assert row.home_town == 'Rome'


def test_missing_name(row):
    with pytest.raises(DataTableKeyError):
        row['age']
    with pytest.raises(AttributeError, match="Row has no attribute 'age'"):
        row.age


def test_bad_key(row):
    with pytest.raises(TypeError, match="Row indices must be int or str"):
        row[1.5]


def test_slice(row):
    assert row[0:1] == ('Bob',)


def test_sequence_protocol(row):
    assert len(row) == 2
    assert list(row) == ['Bob', 'Rome']
    assert row.values == ('Bob', 'Rome')
    assert row.index == 1


def test_equality(row):
    assert row == ['Bob', 'Rome']
    assert row != ('Bob',)
    assert row == row.table.row(1)
    assert row != row.table.row(0)


def test_repr(row):
    assert repr(row) == "Row(1: 'Bob', 'Rome')"


def test_bool_key_rejected(row):
    with pytest.raises(TypeError, match="not bool"):
        row[True]
