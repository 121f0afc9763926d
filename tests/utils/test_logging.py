import logging

from pgsmith.utils.logging import (
    abbreviate_sql,
    get_correlation_id,
    get_logger,
    set_correlation_id,
    time_call,
)


def test_correlation_id_round_trip():
    token = set_correlation_id("test-token")
    assert token == "test-token"
    assert get_correlation_id() == "test-token"


def test_loggers_live_under_package_namespace():
    assert get_logger("tests.logging").name == "pgsmith.tests.logging"
    assert logging.getLogger("pgsmith").handlers


def test_time_call_logs_duration_and_statement(caplog):
    logger = get_logger("tests.logging")
    caplog.set_level(logging.DEBUG, logger=logger.name)
    with time_call("unit-test", logger, sql="SELECT\n  1;", threshold_ms=0):
        pass
    messages = [record.message for record in caplog.records if record.name == logger.name]
    assert any("unit-test took" in message and message.endswith("SELECT 1;") for message in messages)


def test_abbreviate_sql():
    assert abbreviate_sql("SELECT  *\nFROM t;") == "SELECT * FROM t;"
    long_sql = "SELECT " + ", ".join(f"c{i}" for i in range(100)) + " FROM t;"
    short = abbreviate_sql(long_sql, max_length=40)
    assert len(short) == 40
    assert short.endswith("...")
