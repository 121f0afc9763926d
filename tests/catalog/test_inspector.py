import pytest

from pgsmith import CatalogInspector, InvalidArgument, PostgresDialect, QueryError
from pgsmith.catalog import classify_index


class FakeExecutor:
    def __init__(self, result=None):
        self.dialect = PostgresDialect()
        self.statements = []
        self.result = [] if result is None else result

    def execute(self, sql, params=None):
        self.statements.append(sql)
        return self.result


def test_columns_query_shape():
    sql = CatalogInspector(FakeExecutor()).columns_query("users").render()
    assert sql == (
        "SELECT columns.table_schema, columns.column_name, columns.ordinal_position, "
        "columns.column_default, columns.is_nullable, columns.data_type, "
        "columns.character_maximum_length, columns.character_octet_length, "
        "pg_class2.relname AS index_type "
        "FROM pg_attribute "
        "INNER JOIN pg_class AS pg_class1 "
        "ON (pg_attribute.attrelid = pg_class1.oid AND pg_class1.relname = 'users') "
        "INNER JOIN information_schema.columns AS columns "
        "ON (columns.column_name = pg_attribute.attname AND columns.table_name = pg_class1.relname) "
        "LEFT JOIN pg_index "
        "ON (pg_class1.oid = pg_index.indrelid AND pg_attribute.attnum = ANY(pg_index.indkey)) "
        "LEFT JOIN pg_class AS pg_class2 ON (pg_class2.oid = pg_index.indexrelid);"
    )


def test_indexes_query_uses_inner_joins_and_schema_filter():
    sql = CatalogInspector(FakeExecutor()).indexes_query("users", "app").render()
    assert sql.startswith("SELECT columns.column_name, pg_class2.relname AS index_type FROM pg_attribute")
    assert "AND columns.table_schema = 'app')" in sql
    assert "INNER JOIN pg_index ON" in sql
    assert "INNER JOIN pg_class AS pg_class2 ON" in sql
    assert "LEFT JOIN" not in sql


def test_primary_key_query_filters_pkey_indexes():
    sql = CatalogInspector(FakeExecutor()).primary_key_query("users").render()
    assert sql.startswith("SELECT columns.column_name FROM pg_attribute")
    assert sql.endswith("WHERE pg_class2.relname LIKE '%_pkey';")


def test_table_name_literal_is_escaped():
    sql = CatalogInspector(FakeExecutor()).columns_query("o'brien").render()
    assert "pg_class1.relname = 'o''brien'" in sql


def test_list_columns_adds_key_classification():
    rows = [
        {"column_name": "id", "data_type": "bigint", "index_type": "users_pkey"},
        {"column_name": "email", "data_type": "text", "index_type": "users_email_key"},
        {"column_name": "name", "data_type": "text", "index_type": "users_name_idx"},
        {"column_name": "bio", "data_type": "text", "index_type": None},
    ]
    executor = FakeExecutor(rows)
    columns = CatalogInspector(executor).list_columns("users")
    assert [column["key"] for column in columns] == ["PRIMARY", "UNIQUE", None, None]
    assert columns[0]["column_name"] == "id"
    assert "key" not in rows[0]
    assert len(executor.statements) == 1


def test_list_indexes_and_primary_key_return_rows_verbatim():
    rows = [{"column_name": "id", "index_type": "users_pkey"}]
    executor = FakeExecutor(rows)
    inspector = CatalogInspector(executor)
    assert inspector.list_indexes("users") is rows
    assert inspector.list_primary_key("users") is rows
    assert "LIKE '%_pkey'" in executor.statements[1]


def test_list_tables_excludes_system_tables():
    executor = FakeExecutor([{"tablename": "users"}])
    assert CatalogInspector(executor).list_tables() == [{"tablename": "users"}]
    assert executor.statements[0] == (
        "SELECT tablename FROM pg_tables "
        r"WHERE tablename NOT LIKE 'pg\_%' AND tablename NOT LIKE 'sql\_%';"
    )


def test_row_count_result_raises_query_error():
    with pytest.raises(QueryError):
        CatalogInspector(FakeExecutor(result=0)).list_indexes("users")


def test_invalid_table_name():
    with pytest.raises(InvalidArgument):
        CatalogInspector(FakeExecutor()).columns_query("")


@pytest.mark.parametrize(
    "name, expected",
    [
        ("users_pkey", "PRIMARY"),
        ("users_email_key", "UNIQUE"),
        ("users_pkey_idx", None),
        ("", None),
        (None, None),
    ],
)
def test_classify_index(name, expected):
    assert classify_index(name) == expected
