"""
Client-side updatable result set
"""

from mysql.connector.errors import InterfaceError

from .scrollable import ScrollableResultSet
from ..core.connection import quote_ident


class UpdatableResultSet(ScrollableResultSet):
    """
    Scrollable result set whose row changes are written through to one table

    Rows are identified by a key column (the table's primary key), which
    must be part of the select list. Changes are staged with update() and
    sent with update_row() or insert_row().
    """

    def __init__(self, conn, table: str, column_names, rows, key: str = "id"):
        """
        Initialize the result set

        Args:
            conn: PlaygroundConnection used for the write-through statements
            table: Table the rows come from
            column_names: Column labels, in select-list order
            rows: Row tuples in result order
            key: Primary-key column identifying each row
        """
        super().__init__(column_names, rows)
        self.conn = conn
        self.table = table
        self.key = key
        self.key_index = self.column_index(key)
        self.staged = {}
        self.on_insert_row = False
        self.saved_position = 0

    @classmethod
    def from_query(cls, conn, sql: str, table: str, key: str = "id", params=None):
        """
        Execute a query against `table` and buffer its rows

        Returns:
            UpdatableResultSet: Result set positioned before the first row
        """
        result = conn.execute(sql, params)
        return cls(conn, table, result.column_names, result.rows, key=key)

    def _move(self, position: int) -> bool:
        if self.on_insert_row:
            raise InterfaceError(msg="Cursor is on the insert row")
        self.staged = {}
        return super()._move(position)

    def update(self, column, value):
        """
        Stage a new value for a column of the current row or the insert row

        Args:
            column: 1-based column number or column label
            value: New value
        """
        self._check_open()
        if not self.on_insert_row and not self.on_row:
            raise InterfaceError(msg="Cursor is not positioned on a row")
        name = self.column_names[self.column_index(column)]
        self.staged[name] = value

    def cancel_row_updates(self):
        if self.on_insert_row:
            raise InterfaceError(msg="Cursor is on the insert row")
        self.staged = {}

    def update_row(self) -> int:
        """
        Write staged changes of the current row to the table

        Returns:
            int: Number of rows the server updated
        """
        if self.on_insert_row:
            raise InterfaceError(msg="Cursor is on the insert row")
        current = self.row
        if not self.staged:
            return 0

        assignments = ", ".join(f"{quote_ident(col)}=%s" for col in self.staged)
        sql = (f"UPDATE {quote_ident(self.table)} SET {assignments} "
               f"WHERE {quote_ident(self.key)}=%s")
        params = list(self.staged.values()) + [current[self.key_index]]
        result = self.conn.execute(sql, params)

        updated = list(current)
        for col, value in self.staged.items():
            updated[self.column_index(col)] = value
        self.rows[self.position - 1] = tuple(updated)
        self.staged = {}
        return result.rowcount

    def delete_row(self) -> int:
        """
        Delete the current row from the table and the buffer

        The cursor is left on the row before the deleted one.

        Returns:
            int: Number of rows the server deleted
        """
        if self.on_insert_row:
            raise InterfaceError(msg="Cursor is on the insert row")
        current = self.row

        sql = f"DELETE FROM {quote_ident(self.table)} WHERE {quote_ident(self.key)}=%s"
        result = self.conn.execute(sql, (current[self.key_index],))

        del self.rows[self.position - 1]
        self.position -= 1
        self.staged = {}
        return result.rowcount

    def move_to_insert_row(self):
        """Remember the current position and start composing a new row"""
        self._check_open()
        if not self.on_insert_row:
            self.saved_position = self.position
        self.on_insert_row = True
        self.staged = {}

    def insert_row(self):
        """
        Insert the composed row into the table and append it to the buffer

        Returns:
            tuple: The inserted row, with the server-generated key
        """
        self._check_open()
        if not self.on_insert_row:
            raise InterfaceError(msg="Cursor is not on the insert row")
        if not self.staged:
            raise InterfaceError(msg="No values set on the insert row")

        columns = ", ".join(quote_ident(col) for col in self.staged)
        placeholders = ", ".join(["%s"] * len(self.staged))
        sql = f"INSERT INTO {quote_ident(self.table)} ({columns}) VALUES ({placeholders})"
        result = self.conn.execute(sql, list(self.staged.values()))

        row = [None] * len(self.column_names)
        row[self.key_index] = result.lastrowid
        for col, value in self.staged.items():
            row[self.column_index(col)] = value
        self.rows.append(tuple(row))
        self.staged = {}
        return tuple(row)

    def move_to_current_row(self):
        """Leave the insert row and return to the remembered position"""
        if not self.on_insert_row:
            return
        self.on_insert_row = False
        self.staged = {}
        self.position = min(self.saved_position, len(self.rows) + 1)
