import pytest
from mysql.connector import errors as mysql_errors

from sqlplayground.core.connection import PlaygroundConnection, load_driver, open_connection
from sqlplayground.core.errors import DriverNotFoundError

from .fakes import FailingDriver, SERVER_VERSION


def test_load_driver_imports_and_reports(capsys):
    driver = load_driver("mysql.connector")

    assert hasattr(driver, "connect")
    assert capsys.readouterr().out == "Loaded driver: mysql.connector\n"


def test_load_driver_missing_module():
    with pytest.raises(DriverNotFoundError) as excinfo:
        load_driver("no_such_driver_module")

    assert excinfo.value.driver_name == "no_such_driver_module"
    assert isinstance(excinfo.value.__cause__, ImportError)


def test_open_connection_passes_config(config, driver, capsys):
    conn = open_connection(config, driver)

    assert driver.connections[0].kwargs == config.to_connect_args()
    out = capsys.readouterr().out
    assert "mysql://db.test:3307/emp" in out
    assert SERVER_VERSION in out
    conn.close()


def test_connection_failure_propagates(config):
    with pytest.raises(mysql_errors.InterfaceError) as excinfo:
        open_connection(config, FailingDriver())

    assert excinfo.value.errno == 2003


def test_execute_returns_rows_and_closes_cursor(conn, raw):
    conn.execute("CREATE TABLE t (id INTEGER PRIMARY KEY AUTOINCREMENT, name TEXT)")
    inserted = conn.execute("INSERT INTO t(name) VALUES (%s)", ("x",))
    result = conn.execute("SELECT id, name FROM t")

    assert inserted.rowcount == 1
    assert inserted.lastrowid == 1
    assert result.column_names == ("id", "name")
    assert result.rows == [(1, "x")]
    assert raw.closed_cursors == 3


def test_cursor_is_closed_when_statement_fails(conn, raw):
    with pytest.raises(mysql_errors.ProgrammingError):
        conn.execute("SELECT * FROM missing")

    assert raw.closed_cursors == 1


def test_transaction_restores_autocommit(conn, raw):
    with conn.transaction():
        assert conn.autocommit is False
        assert raw.autocommit is False

    assert conn.autocommit is True
    assert raw.autocommit is True


def test_transaction_restores_autocommit_on_error(conn):
    with pytest.raises(RuntimeError):
        with conn.transaction():
            raise RuntimeError("boom")

    assert conn.autocommit is True


def test_savepoint_rollback_keeps_earlier_work(conn):
    conn.execute("CREATE TABLE t (v INTEGER)")

    with conn.transaction():
        conn.execute("INSERT INTO t VALUES (1)")
        conn.set_savepoint("sp1")
        conn.execute("INSERT INTO t VALUES (2)")
        conn.rollback_to_savepoint("sp1")
        conn.commit()

    assert conn.execute("SELECT v FROM t").rows == [(1,)]


def test_rollback_discards_transaction(conn):
    conn.execute("CREATE TABLE t (v INTEGER)")

    with conn.transaction():
        conn.execute("INSERT INTO t VALUES (1)")
        conn.rollback()

    assert conn.execute("SELECT v FROM t").rows == []


def test_commit_writes_journal(config, driver, tmp_path, capsys):
    conn = PlaygroundConnection(config, driver, journal_dir=tmp_path)
    conn.execute("CREATE TABLE t (v INTEGER)")

    with conn.transaction():
        conn.execute("INSERT INTO t VALUES (1)")
        conn.set_savepoint("sp1")
        conn.execute("INSERT INTO t VALUES (2)")
        conn.rollback_to_savepoint("sp1")
        conn.commit()

    assert "Transaction committed" in capsys.readouterr().out
    journals = sorted(tmp_path.glob("txn_*.sql"))
    last = journals[-1].read_text(encoding="utf-8")
    assert "INSERT INTO t VALUES (1)" in last
    assert "INSERT INTO t VALUES (2)" not in last
    conn.close()


def test_context_manager_closes_and_rolls_back(config, driver):
    with pytest.raises(RuntimeError):
        with PlaygroundConnection(config, driver) as conn:
            conn.autocommit = False
            raise RuntimeError("boom")

    raw = driver.connections[0]
    assert raw.closed
    assert raw.rollbacks == 1


def test_user_name_comes_from_server(conn):
    assert conn.user_name() == "root@localhost"


def test_callproc_missing_procedure(conn):
    with pytest.raises(mysql_errors.ProgrammingError) as excinfo:
        conn.callproc("display", ("AAA", 0))

    assert excinfo.value.errno == 1305


def test_failed_autocommit_statements_are_not_journaled(config, driver, tmp_path):
    conn = PlaygroundConnection(config, driver, journal_dir=tmp_path)

    with pytest.raises(mysql_errors.ProgrammingError):
        conn.execute("SELECT * FROM missing")
    with pytest.raises(mysql_errors.ProgrammingError):
        conn.callproc("display", ("AAA", 0))

    assert list(tmp_path.glob("txn_*.sql")) == []
    assert conn.journal.pending() == []
    conn.close()


def test_failed_statement_is_dropped_from_open_transaction(config, driver, tmp_path):
    conn = PlaygroundConnection(config, driver, journal_dir=tmp_path)
    conn.execute("CREATE TABLE t (v INTEGER)")

    with conn.transaction():
        conn.execute("INSERT INTO t VALUES (1)")
        with pytest.raises(mysql_errors.ProgrammingError):
            conn.execute("INSERT INTO missing VALUES (2)")
        conn.commit()

    last = sorted(tmp_path.glob("txn_*.sql"))[-1].read_text(encoding="utf-8")
    assert "INSERT INTO t VALUES (1)" in last
    assert "missing" not in last
    conn.close()
