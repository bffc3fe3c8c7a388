"""
Error types and error-chain helpers
"""

from collections import namedtuple

from mysql.connector import errors as mysql_errors


# Update counts reported by a batch, as MySQL's drivers report them
SUCCESS_NO_INFO = -2
EXECUTE_FAILED = -3

ErrorRecord = namedtuple('ErrorRecord', ['sqlstate', 'errno', 'message'])


class DriverNotFoundError(Exception):
    """Raised when the database driver module cannot be imported"""

    def __init__(self, driver_name: str, reason: str = None):
        self.driver_name = driver_name
        message = driver_name if reason is None else f"{driver_name} ({reason})"
        super().__init__(message)


class SimulatedFailure(mysql_errors.DatabaseError):
    """Deliberately raised inside a transaction to exercise rollback paths"""

    def __init__(self, msg: str):
        super().__init__(msg=msg, sqlstate='HY000')


class BatchUpdateError(mysql_errors.DatabaseError):
    """
    One or more statements of a batch failed

    Attributes:
        update_counts: Count per executed statement (EXECUTE_FAILED for failures)
        errors: Driver errors raised by the failing statements, in order
    """

    def __init__(self, msg: str, update_counts, errors=None):
        self.update_counts = list(update_counts)
        self.errors = list(errors or [])
        first = self.errors[0] if self.errors else None
        super().__init__(
            msg=msg,
            errno=getattr(first, 'errno', None),
            sqlstate=getattr(first, 'sqlstate', None),
        )


def to_record(exc: BaseException) -> ErrorRecord:
    """
    Convert one exception into an ErrorRecord

    Args:
        exc: Driver error or any other exception

    Returns:
        ErrorRecord: SQL state, numeric code and message
    """
    if isinstance(exc, mysql_errors.Error):
        # The driver stores -1 when no error code was given
        errno = exc.errno if exc.errno not in (None, -1) else 0
        return ErrorRecord(exc.sqlstate, errno, exc.msg)
    return ErrorRecord(None, 0, str(exc))


def error_chain(exc: BaseException) -> list:
    """
    Flatten an error and everything linked to it into ordered records

    The order is: the error itself, the errors it aggregates (batch
    failures), then its cause and context chain. Each exception appears once.

    Args:
        exc: Top-level exception

    Returns:
        list: ErrorRecord entries
    """
    records = []
    seen = set()
    pending = [exc]

    while pending:
        current = pending.pop(0)
        if current is None or id(current) in seen:
            continue
        seen.add(id(current))
        records.append(to_record(current))

        linked = list(getattr(current, 'errors', []) or [])
        linked.append(current.__cause__ or current.__context__)
        pending = linked + pending

    return records
