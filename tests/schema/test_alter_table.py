import pytest

from pgsmith import AlterTable, IncompleteStatementError, InvalidArgument


def test_table_name_is_quoted_once():
    sql = AlterTable("users").remove_field("legacy").render()
    assert sql == 'ALTER TABLE "users" DROP COLUMN "legacy";'
    assert '""' not in sql


def test_clause_order_is_fixed():
    sql = (
        AlterTable("users")
        .add_primary_key("id")
        .change_field("email", {"type": "text", "null": False})
        .add_field("age", {"type": "int", "default": 0})
        .remove_primary_key("users_pkey")
        .remove_field("nickname")
        .render()
    )
    assert sql == (
        'ALTER TABLE "users" DROP COLUMN "nickname", \n'
        'ADD "age" int DEFAULT 0, \n'
        'ALTER COLUMN "email" text NOT NULL, \n'
        'DROP PRIMARY KEY "users_pkey", \n'
        'ADD PRIMARY KEY ("id");'
    )


def test_change_with_rename_uses_change_clause():
    sql = AlterTable("users").change_field("mail", {"name": "email", "type": "varchar", "length": 120}).render()
    assert sql == 'ALTER TABLE "users" CHANGE "mail" "email" varchar(120);'


def test_added_primary_keys_collapse_into_one_clause():
    sql = AlterTable("t").add_primary_key("a").add_primary_key("b").render()
    assert sql == 'ALTER TABLE "t" ADD PRIMARY KEY ("a", "b");'


def test_nullable_true_never_renders_default():
    sql = AlterTable("t").add_field("note", {"type": "text", "null": True, "default": "n/a"}).render()
    assert sql == 'ALTER TABLE "t" ADD "note" text DEFAULT NULL;'


def test_add_field_list_type():
    sql = AlterTable("t").add_field("tags", {"type": "varchar", "length": 32, "list": True}).render()
    assert sql == 'ALTER TABLE "t" ADD "tags" varchar(32)[];'


def test_invalid_arguments():
    alter = AlterTable("t")
    with pytest.raises(InvalidArgument):
        alter.add_field("a", None)
    with pytest.raises(InvalidArgument):
        alter.change_field(None, {"type": "int"})
    with pytest.raises(InvalidArgument):
        alter.remove_field(1)
    with pytest.raises(InvalidArgument):
        alter.remove_primary_key("")


def test_render_without_name_raises():
    with pytest.raises(IncompleteStatementError):
        AlterTable().add_field("a", {"type": "int"}).render()
