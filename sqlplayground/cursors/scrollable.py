"""
Client-side scrollable result set
"""

from mysql.connector.errors import InterfaceError


class ScrollableResultSet:
    """
    Scroll-insensitive, read-only view over a fully buffered query result

    Rows are numbered from 1. Position 0 is before the first row and
    len + 1 is after the last row; the cursor starts before the first row.
    """

    # Cursor types this layer implements
    FORWARD_ONLY = True
    SCROLL_INSENSITIVE = True
    SCROLL_SENSITIVE = False

    def __init__(self, column_names, rows):
        """
        Initialize the result set

        Args:
            column_names: Column labels, in select-list order
            rows: Row tuples in result order
        """
        self.column_names = tuple(column_names)
        self.rows = [tuple(row) for row in rows]
        self.position = 0
        self.closed = False

    @classmethod
    def from_query(cls, conn, sql: str, params=None):
        """
        Execute a query and buffer its rows

        Args:
            conn: PlaygroundConnection
            sql: SELECT statement
            params: Bound parameter values (optional)

        Returns:
            ScrollableResultSet: Result set positioned before the first row
        """
        result = conn.execute(sql, params)
        return cls(result.column_names, result.rows)

    def __len__(self):
        return len(self.rows)

    def __iter__(self):
        """Iterate forward from the current position"""
        while self.next():
            yield self.row

    def _check_open(self):
        if self.closed:
            raise InterfaceError(msg="Result set is closed")

    def _move(self, position: int) -> bool:
        self._check_open()
        self.position = max(0, min(position, len(self.rows) + 1))
        return self.on_row

    @property
    def on_row(self) -> bool:
        return 1 <= self.position <= len(self.rows)

    @property
    def row_number(self) -> int:
        """Current row number, or 0 when not positioned on a row"""
        return self.position if self.on_row else 0

    @property
    def is_before_first(self) -> bool:
        return bool(self.rows) and self.position == 0

    @property
    def is_after_last(self) -> bool:
        return bool(self.rows) and self.position == len(self.rows) + 1

    def next(self) -> bool:
        return self._move(self.position + 1)

    def previous(self) -> bool:
        return self._move(self.position - 1)

    def first(self) -> bool:
        return self._move(1)

    def last(self) -> bool:
        return self._move(len(self.rows))

    def before_first(self):
        self._move(0)

    def after_last(self):
        self._move(len(self.rows) + 1)

    def absolute(self, row: int) -> bool:
        """
        Move to an absolute row number

        Args:
            row: 1-based row number; negative values count back from the
                last row (-1 is the last row) and 0 moves before the first row

        Returns:
            bool: True if the cursor is on a row
        """
        if row < 0:
            row = len(self.rows) + 1 + row
            if row < 1:
                return self._move(0)
        return self._move(row)

    def relative(self, offset: int) -> bool:
        """
        Move a number of rows forward (positive) or backward (negative)

        Returns:
            bool: True if the cursor is on a row
        """
        return self._move(self.position + offset)

    @property
    def row(self) -> tuple:
        """Current row; raises InterfaceError when not on a row"""
        self._check_open()
        if not self.on_row:
            raise InterfaceError(msg="Cursor is not positioned on a row")
        return self.rows[self.position - 1]

    def column_index(self, column) -> int:
        """
        Resolve a column to its 0-based index

        Args:
            column: 1-based column number or column label (case-insensitive)
        """
        if isinstance(column, int):
            if not 1 <= column <= len(self.column_names):
                raise InterfaceError(msg=f"Column index out of range: {column}")
            return column - 1

        lowered = [name.lower() for name in self.column_names]
        try:
            return lowered.index(str(column).lower())
        except ValueError:
            raise InterfaceError(msg=f"Column not found: {column}") from None

    def get(self, column):
        """Value of a column in the current row"""
        return self.row[self.column_index(column)]

    def close(self):
        self.closed = True

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
