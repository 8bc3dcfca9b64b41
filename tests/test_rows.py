"""Row collections and their mutation entry points."""

import pytest
from py_datatable import DataRowCollection, DataRowCollectionModifiable, DataTable
from py_datatable.errors import ArityError, ColumnIndexError


@pytest.fixture
def people():
	return DataTable.from_dict('people', {'Name': ['Alice', 'Bob'], 'Age': [30, 25]})


class TestBuild:

	def test_table_rows_is_modifiable(self, people):
		assert isinstance(people.rows, DataRowCollectionModifiable)
		assert people.rows is people.rows

	def test_derives_rows(self, people):
		rows = DataRowCollection.build(people)
		assert rows.row_count == 2
		assert len(rows) == 2
		assert rows.table is people
		assert [r.index for r in rows] == [0, 1]

	def test_explicit_rows(self, people):
		rows = DataRowCollection.build(people, [people.row(1)])
		assert rows.row_count == 1
		assert rows[0] == ('Bob', 25)

	def test_empty_table(self):
		t = DataTable.build('empty').value
		assert len(t.rows) == 0
		assert list(t.rows) == []

	def test_slice(self, people):
		assert people.rows[1:] == (people.rows[1],)

	def test_to_tuples(self, people):
		assert people.rows.to_tuples() == [('Alice', 30), ('Bob', 25)]

	def test_equality(self, people):
		other = DataTable.from_dict('other', {'N': ['Alice', 'Bob'], 'A': [30, 25]})
		assert people.rows == other.rows
		assert people.rows != [('Alice', 30)]

	def test_repr(self, people):
		assert repr(people.rows) == "DataRowCollectionModifiable('people', 2 rows)"


class TestEntryPoints:

	def test_add_values(self, people):
		result = people.rows.add_values('Carol', 40)
		assert result.is_success
		assert result.value.rows[2] == ('Carol', 40)

	def test_add_sequence(self, people):
		assert people.rows.add(['Carol', 40]).value.row_count == 3

	def test_insert_values(self, people):
		new = people.rows.insert_values(0, 'Carol', 40).value
		assert new.rows.to_tuples() == [('Carol', 40), ('Alice', 30), ('Bob', 25)]

	def test_replace_values(self, people):
		new = people.rows.replace_values(1, 'Robert', 26).value
		assert new.rows.to_tuples() == [('Alice', 30), ('Robert', 26)]

	def test_remove(self, people):
		new = people.rows.remove(0).value
		assert new.rows.to_tuples() == [('Bob', 25)]

	def test_failures_come_back_as_results(self, people):
		assert isinstance(people.rows.add_values('Dan').error, ArityError)
		assert isinstance(people.rows.remove(7).error, ColumnIndexError)

	def test_wrapper_unchanged_after_mutation(self, people):
		rows = people.rows
		people.rows.add_values('Carol', 40)
		assert rows.table is people
		assert rows.row_count == 2
		assert people.rows.to_tuples() == [('Alice', 30), ('Bob', 25)]

	def test_chained_mutations(self, people):
		t = people.rows.add_values('Carol', 40).value
		t = t.rows.replace_values(0, 'Alicia', 31).value
		t = t.rows.remove(1).value
		assert t.rows.to_tuples() == [('Alicia', 31), ('Carol', 40)]
		assert people.rows.to_tuples() == [('Alice', 30), ('Bob', 25)]
