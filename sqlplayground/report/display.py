"""
Console output for demo results and error chains
"""

import sys

from ..core.errors import error_chain


class ConsoleDisplay:
    """
    Print demo sections, rows and error chains

    Data lines are tab-separated and carry no decoration so the output of
    a run can be compared line by line.
    """

    def __init__(self, out=None, err=None):
        """
        Initialize display

        Args:
            out: Stream for results (defaults to sys.stdout at print time)
            err: Stream for error chains (defaults to sys.stderr at print time)
        """
        self.out = out
        self.err = err

    def _print(self, text: str = "", error: bool = False):
        stream = (self.err or sys.stderr) if error else (self.out or sys.stdout)
        print(text, file=stream)

    def section(self, title: str):
        self._print(f"\n-- {title} --")

    def line(self, text: str = ""):
        self._print(text)

    def row(self, values, prefix: str = ""):
        """Print a row as tab-separated values"""
        self._print(prefix + "\t".join(str(v) for v in values))

    def rows(self, rows):
        for values in rows:
            self.row(values)

    def labelled_row(self, label: str, values):
        """Print e.g. 'First: 1 AAA'"""
        self._print(f"{label}: " + " ".join(str(v) for v in values))

    def error_chain(self, exc: BaseException):
        """
        Print every record of an error chain to the error stream

        Args:
            exc: Top-level exception
        """
        self._print("\n--- SQL error chain ---", error=True)
        for record in error_chain(exc):
            self._print(
                f"SQLState={record.sqlstate} ErrorCode={record.errno} "
                f"Message={record.message}",
                error=True,
            )

    def driver_missing(self, exc: BaseException):
        self._print(f"❌ Driver not found: {exc}", error=True)


display = ConsoleDisplay()
