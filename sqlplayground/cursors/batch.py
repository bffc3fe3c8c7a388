"""
Statement batches with per-statement update counts
"""

from mysql.connector import Error as MySQLError

from ..core.errors import BatchUpdateError, EXECUTE_FAILED


class BatchStatement:
    """
    Queue SQL statements and run them together

    By default a failing statement does not stop the batch: its slot in
    the update counts is EXECUTE_FAILED and the remaining statements still
    run. BatchUpdateError is raised at the end if anything failed.
    """

    def __init__(self, conn, continue_on_error: bool = True):
        """
        Initialize an empty batch

        Args:
            conn: PlaygroundConnection the statements run on
            continue_on_error: Keep executing after a failed statement
        """
        self.conn = conn
        self.continue_on_error = continue_on_error
        self.statements = []

    def add_batch(self, sql: str):
        self.statements.append(sql)

    def clear_batch(self):
        self.statements = []

    def execute_batch(self) -> list:
        """
        Execute every queued statement in order

        Returns:
            list: Update count per statement

        Raises:
            BatchUpdateError: If any statement failed; carries the counts
                collected so far and the per-statement errors
        """
        statements, self.statements = self.statements, []
        counts = []
        errors = []

        for sql in statements:
            try:
                result = self.conn.execute(sql)
            except MySQLError as e:
                errors.append(e)
                if not self.continue_on_error:
                    break
                counts.append(EXECUTE_FAILED)
                continue
            counts.append(result.rowcount)

        if errors:
            raise BatchUpdateError(errors[0].msg, counts, errors)

        return counts

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.clear_batch()
