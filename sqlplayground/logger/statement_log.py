"""
Memory-buffered statement journal that flushes to file on COMMIT
"""

import time
import threading
from datetime import datetime
from pathlib import Path


class StatementLog:
    """
    Keep executed statements in memory, flush to file on COMMIT
    Rollbacks discard the buffer; savepoint rollbacks truncate it
    """

    def __init__(self, session_id: str, user: str, log_dir=None, echo=False):
        """
        Initialize the statement journal

        Args:
            session_id: Identifier written on every journal line
            user: Database user executing the statements
            log_dir: Directory for committed transaction files, or None to
                keep the journal in memory only
            echo: Print every statement as it is logged
        """
        self.session_id = session_id
        self.user = user
        self.echo = echo
        self.log_dir = Path(log_dir) if log_dir is not None else None
        if self.log_dir is not None:
            self.log_dir.mkdir(parents=True, exist_ok=True)

        self.buffer = []
        self.savepoints = {}
        self.flushed_files = []
        self.lock = threading.Lock()

    def log(self, sql: str):
        """
        Add a statement to the buffer

        Args:
            sql: SQL text as sent to the server
        """
        timestamp_ms = int(time.time() * 1000)
        statement = " ".join(sql.split())

        # Raw format: timestamp|session|user|statement
        raw_line = f"{timestamp_ms}|{self.session_id}|{self.user}|{statement}\n"

        if self.echo:
            print(f"SQL> {statement}")

        with self.lock:
            self.buffer.append(raw_line)

    def discard_last(self):
        """Drop the most recently logged statement (it failed on the server)"""
        with self.lock:
            if self.buffer:
                self.buffer.pop()

    def mark(self, name: str):
        """Remember the buffer position of a savepoint"""
        with self.lock:
            self.savepoints[name] = len(self.buffer)

    def rollback_to(self, name: str):
        """
        Drop statements logged after a savepoint

        Args:
            name: Savepoint name passed to mark()
        """
        with self.lock:
            position = self.savepoints.get(name)
            if position is None:
                return
            del self.buffer[position:]
            self.savepoints = {
                sp: pos for sp, pos in self.savepoints.items() if pos <= position
            }

    def flush_on_commit(self):
        """
        COMMIT detected - flush memory buffer to file

        Returns:
            str: Path to created journal file, or None if nothing was written
        """
        with self.lock:
            buffer = self.buffer
            self.buffer = []
            self.savepoints = {}

            if not buffer or self.log_dir is None:
                return None

            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S_%f")
            filepath = self.log_dir / f"txn_{self.session_id}_{timestamp}.sql"

            with open(filepath, 'w', encoding='utf-8') as f:
                f.writelines(buffer)

            self.flushed_files.append(str(filepath))
            return str(filepath)

    def clear(self):
        """Discard the buffer without flushing (e.g., on ROLLBACK)"""
        with self.lock:
            self.buffer = []
            self.savepoints = {}

    def pending(self) -> list:
        """
        Statements logged since the last commit or rollback

        Returns:
            list: Statement text without the line prefix
        """
        with self.lock:
            return [line.rstrip("\n").split('|', 3)[3] for line in self.buffer]
