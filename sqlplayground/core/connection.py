"""
Driver loading and the playground's MySQL connection wrapper
"""

import importlib
import uuid
from collections import namedtuple
from contextlib import contextmanager

import mysql.connector

from .errors import DriverNotFoundError
from ..logger.statement_log import StatementLog


DRIVER_NAME = "mysql.connector"

StatementResult = namedtuple(
    'StatementResult', ['rowcount', 'lastrowid', 'column_names', 'description', 'rows']
)


def load_driver(name: str = DRIVER_NAME):
    """
    Import the database driver module

    Args:
        name: Dotted module name of the driver

    Returns:
        module: The imported driver

    Raises:
        DriverNotFoundError: If the module cannot be imported
    """
    try:
        driver = importlib.import_module(name)
    except ImportError as e:
        raise DriverNotFoundError(name, str(e)) from e

    print(f"Loaded driver: {name}")
    return driver


def open_connection(config, driver=None, journal_dir=None, echo_sql=False):
    """
    Open the single connection used by every demo step

    Args:
        config: DatabaseConfig with the connection parameters
        driver: Driver module exposing connect() (defaults to mysql.connector)
        journal_dir: Directory for committed statement journals (optional)
        echo_sql: Print every statement as it is executed

    Returns:
        PlaygroundConnection: Open connection
    """
    conn = PlaygroundConnection(config, driver, journal_dir=journal_dir, echo_sql=echo_sql)
    print(f"📡 Connected: {config.url} as {config.user} (server {conn.server_version})")
    return conn


class PlaygroundConnection:
    """
    Wraps a MySQL connection to journal statements and expose the
    transaction, savepoint and cursor operations the demos use
    """

    def __init__(self, config, driver=None, journal_dir=None, echo_sql=False):
        """
        Connect to the server

        Args:
            config: DatabaseConfig with the connection parameters
            driver: Driver module exposing connect() (defaults to mysql.connector)
            journal_dir: Directory for committed statement journals (optional)
            echo_sql: Print every statement as it is executed
        """
        driver = driver or mysql.connector
        self.conn = driver.connect(**config.to_connect_args())
        self.config = config
        self.session_id = self._generate_session_id()
        self.journal = StatementLog(self.session_id, config.user, journal_dir, echo=echo_sql)
        self._autocommit = config.autocommit

    def _generate_session_id(self):
        """Generate unique session ID"""
        return str(uuid.uuid4())[:8]

    @contextmanager
    def _journaled(self, sql: str):
        """
        Journal a statement around the driver call

        A statement that fails is dropped from the journal. In autocommit
        mode a statement that succeeds is its own transaction and is flushed.
        """
        self.journal.log(sql)
        try:
            yield
        except Exception:
            self.journal.discard_last()
            raise
        if self._autocommit:
            self.journal.flush_on_commit()

    @contextmanager
    def cursor(self, **kwargs):
        """Driver cursor that is closed on every exit path"""
        cursor = self.conn.cursor(**kwargs)
        try:
            yield cursor
        finally:
            cursor.close()

    def execute(self, sql: str, params=None) -> StatementResult:
        """
        Execute one statement and collect its results

        Args:
            sql: SQL statement, with %s placeholders for params
            params: Sequence of bound parameter values (optional)

        Returns:
            StatementResult: Row count, generated key and any returned rows
        """
        with self.cursor() as cursor:
            with self._journaled(sql):
                if params is not None:
                    cursor.execute(sql, params)
                else:
                    cursor.execute(sql)

            rows = cursor.fetchall() if cursor.with_rows else []
            column_names = tuple(cursor.column_names) if cursor.description else ()

            return StatementResult(
                rowcount=cursor.rowcount,
                lastrowid=cursor.lastrowid,
                column_names=column_names,
                description=cursor.description,
                rows=rows,
            )

    def callproc(self, name: str, args=()):
        """
        Call a stored procedure

        Args:
            name: Procedure name
            args: IN/OUT argument values; OUT slots hold placeholders

        Returns:
            tuple: (updated args, list of result-set row lists)
        """
        with self.cursor() as cursor:
            with self._journaled(f"CALL {name}({', '.join(repr(a) for a in args)})"):
                result_args = cursor.callproc(name, args)
                result_sets = [result.fetchall() for result in cursor.stored_results()]
            return tuple(result_args), result_sets

    @property
    def autocommit(self) -> bool:
        return self._autocommit

    @autocommit.setter
    def autocommit(self, value: bool):
        if value == self._autocommit:
            return
        self.conn.autocommit = value
        self._autocommit = value
        if value:
            # Re-enabling autocommit commits the open transaction
            self.journal.flush_on_commit()

    @contextmanager
    def transaction(self):
        """
        Turn autocommit off for the block and restore it afterwards

        Committing or rolling back is left to the block.
        """
        previous = self._autocommit
        self.autocommit = False
        try:
            yield self
        finally:
            self.autocommit = previous

    def commit(self):
        """Commit transaction and flush the statement journal"""
        self.conn.commit()
        log_file = self.journal.flush_on_commit()
        if log_file:
            print(f"✓ Transaction committed - logged to {log_file}")

    def rollback(self):
        """Rollback transaction and discard the statement journal"""
        self.conn.rollback()
        self.journal.clear()

    def set_savepoint(self, name: str) -> str:
        """
        Create a named savepoint in the current transaction

        Args:
            name: Savepoint name

        Returns:
            str: The savepoint name, for rollback_to_savepoint()
        """
        self.execute(f"SAVEPOINT {quote_ident(name)}")
        self.journal.mark(name)
        return name

    def rollback_to_savepoint(self, name: str):
        """Undo everything executed after the savepoint"""
        self.execute(f"ROLLBACK TO SAVEPOINT {quote_ident(name)}")
        self.journal.rollback_to(name)

    def release_savepoint(self, name: str):
        self.execute(f"RELEASE SAVEPOINT {quote_ident(name)}")

    def scrollable(self, sql: str, params=None):
        """Scroll-insensitive, read-only result set for a query"""
        from ..cursors.scrollable import ScrollableResultSet
        return ScrollableResultSet.from_query(self, sql, params)

    def updatable(self, sql: str, table: str, key: str = "id", params=None):
        """Result set whose rows write through to `table`, keyed on `key`"""
        from ..cursors.updatable import UpdatableResultSet
        return UpdatableResultSet.from_query(self, sql, table, key=key, params=params)

    def batch(self, continue_on_error: bool = True):
        """Empty statement batch bound to this connection"""
        from ..cursors.batch import BatchStatement
        return BatchStatement(self, continue_on_error=continue_on_error)

    @property
    def server_version(self) -> str:
        return self.conn.get_server_info()

    def user_name(self) -> str:
        """Connected account as reported by the server (user@host)"""
        result = self.execute("SELECT USER()")
        return result.rows[0][0] if result.rows else self.config.user

    def close(self):
        """Close connection"""
        self.conn.close()

    def __enter__(self):
        """Context manager entry"""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit"""
        try:
            if exc_type is not None and not self._autocommit:
                self.rollback()
        finally:
            self.close()


def quote_ident(name: str) -> str:
    return f"`{name.replace('`', '``')}`"
