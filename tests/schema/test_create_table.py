import logging

import pytest

from pgsmith import ColumnSpec, CreateTable, IncompleteStatementError, InvalidArgument


def test_create_table_example():
    sql = (
        CreateTable("users")
        .add_field("id", {"type": "bigserial"})
        .add_primary_key("id")
        .add_field("email", {"type": "varchar", "length": 255, "null": False})
        .render()
    )
    assert sql == (
        'CREATE TABLE "users" ("id" bigserial, "email" varchar(255) NOT NULL, '
        'PRIMARY KEY ("id")) ;'
    )


def test_composite_primary_key_renders_single_clause():
    sql = (
        CreateTable("memberships")
        .add_field("user_id", {"type": "int"})
        .add_field("group_id", {"type": "int"})
        .set_primary_keys(["user_id", "group_id"])
        .render()
    )
    assert sql == (
        'CREATE TABLE "memberships" ("user_id" int, "group_id" int, '
        'PRIMARY KEY ("user_id", "group_id")) ;'
    )
    assert sql.count("PRIMARY KEY") == 1


def test_empty_primary_key_list_omits_clause():
    sql = CreateTable("logs").add_field("line", {"type": "text"}).render()
    assert sql == 'CREATE TABLE "logs" ("line" text) ;'


def test_with_oids_suffix():
    create = CreateTable("legacy").add_field("id", {"type": "int"}).with_oids(True)
    assert create.render() == 'CREATE TABLE "legacy" ("id" int) WITH OIDS;'
    create.with_oids(False)
    assert create.render() == 'CREATE TABLE "legacy" ("id" int) ;'


def test_empty_field_list_renders_empty_body(caplog):
    caplog.set_level(logging.DEBUG, logger="pgsmith.schema.create")
    assert CreateTable("empty").render() == 'CREATE TABLE "empty" () ;'
    assert any("without columns" in record.message for record in caplog.records)


def test_primary_key_without_fields():
    sql = CreateTable("keys").add_primary_key("id").render()
    assert sql == 'CREATE TABLE "keys" (PRIMARY KEY ("id")) ;'


def test_add_field_last_write_wins_and_keeps_first_position():
    sql = (
        CreateTable("t")
        .add_field("a", {"type": "int"})
        .add_field("b", {"type": "int"})
        .add_field("a", {"type": "text"})
        .render()
    )
    assert sql == 'CREATE TABLE "t" ("a" text, "b" int) ;'


def test_set_fields_replaces_mapping_and_accepts_column_specs():
    create = CreateTable("t").add_field("old", {"type": "int"})
    create.set_fields({"x": ColumnSpec(type="int", unique=True), "y": {"type": "text"}})
    assert create.render() == 'CREATE TABLE "t" ("x" int UNIQUE, "y" text) ;'


def test_duplicate_primary_keys_are_kept():
    sql = CreateTable("t").add_primary_key("id").add_primary_key("id").render()
    assert 'PRIMARY KEY ("id", "id")' in sql


def test_schema_qualified_table_name():
    assert CreateTable("app.users").render() == 'CREATE TABLE "app"."users" () ;'


@pytest.mark.parametrize("name", ["", None, 5])
def test_set_name_rejects_invalid(name):
    with pytest.raises(InvalidArgument):
        CreateTable().set_name(name)


def test_invalid_configuration_raises_at_configuration_time():
    create = CreateTable("t")
    with pytest.raises(InvalidArgument):
        create.add_field(3, {"type": "int"})
    with pytest.raises(InvalidArgument):
        create.add_field("a", "int")
    with pytest.raises(InvalidArgument):
        create.set_fields([("a", {"type": "int"})])
    with pytest.raises(InvalidArgument):
        create.set_primary_keys("id")
    with pytest.raises(InvalidArgument):
        create.with_oids("yes")


def test_render_without_name_raises():
    with pytest.raises(IncompleteStatementError):
        CreateTable().render()


def test_render_is_idempotent():
    create = CreateTable("t").add_field("a", {"type": "int", "default": 3})
    assert create.render() == create.render() == str(create)
