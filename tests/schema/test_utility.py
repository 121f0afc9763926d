import logging

import pytest

from pgsmith import IncompleteStatementError, InvalidArgument, Utility


def test_drop_table():
    assert Utility().drop_table("users").render() == 'DROP TABLE "users";'


def test_truncate():
    assert Utility().truncate("users").render() == 'TRUNCATE "users";'


def test_rename_table():
    assert Utility().rename_table("users", "members").render() == 'RENAME TABLE "users" TO "members";'


def test_set_schema_accepts_csv_or_many_names():
    assert Utility().set_schema("public,app").render() == "SET search_path TO public,app;"
    assert Utility().set_schema("app", "public").render() == "SET search_path TO app,public;"


def test_last_command_wins():
    utility = Utility().drop_table("a").truncate("b")
    assert utility.render() == 'TRUNCATE "b";'


def test_destructive_commands_log_warning(caplog):
    caplog.set_level(logging.WARNING, logger="pgsmith.schema.utility")
    Utility().drop_table("users")
    assert any("DROP TABLE generated" in record.message for record in caplog.records)


def test_render_before_command_raises():
    with pytest.raises(IncompleteStatementError):
        Utility().render()


def test_invalid_names():
    with pytest.raises(InvalidArgument):
        Utility().drop_table(None)
    with pytest.raises(InvalidArgument):
        Utility().rename_table("a", "")
    with pytest.raises(InvalidArgument):
        Utility().set_schema()
