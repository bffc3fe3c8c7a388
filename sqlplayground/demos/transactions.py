"""
Transaction demonstrations: savepoint rollback and statement batches
"""

from .schema import TABLE
from ..core.errors import BatchUpdateError, SimulatedFailure
from ..report.display import display


SAVEPOINT_NAME = "sp1"


def savepoint_demo(conn) -> str:
    """
    Roll part of a transaction back to a savepoint, then commit the rest

    AAA's update happens before the savepoint and is committed; EEE's
    update happens after it and is undone by the rollback. The commit
    runs whether or not the failure occurred.

    Returns:
        str: Message of the error that triggered the rollback, or None
    """
    display.section("Transaction with savepoint")
    failure = None

    with conn.transaction():
        savepoint = None
        try:
            conn.execute(f"UPDATE {TABLE} SET age=age+10 WHERE first='AAA'")
            savepoint = conn.set_savepoint(SAVEPOINT_NAME)
            conn.execute(f"UPDATE {TABLE} SET age=age+10 WHERE first='EEE'")
            raise SimulatedFailure("Simulated failure after EEE update.")
        except SimulatedFailure as e:
            failure = e.msg
            display.line(f"Error occurred, rolling back to {savepoint}: {e.msg}")
            conn.rollback_to_savepoint(savepoint)
        finally:
            conn.commit()

    return failure


def batch_demo(conn) -> list:
    """
    Run a two-statement batch where the second statement targets a missing table

    On success the batch is committed. On partial failure the counts
    collected so far are printed and the whole transaction is rolled back.

    Returns:
        list: Update counts reported by the batch
    """
    display.section("Batch demo")

    with conn.transaction():
        with conn.batch() as batch:
            batch.add_batch(f"UPDATE {TABLE} SET age=age+1 WHERE first='AAA'")
            batch.add_batch("UPDATE EmployeesX SET age=0 WHERE first='ZZZ'")
            try:
                counts = batch.execute_batch()
            except BatchUpdateError as bue:
                display.line(f"Batch update failed: {bue.msg}")
                display.line(f"Counts so far: {bue.update_counts}")
                conn.rollback()
                return bue.update_counts

            display.line(f"Batch counts: {counts}")
            conn.commit()
            return counts
