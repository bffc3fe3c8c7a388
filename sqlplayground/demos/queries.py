"""
Query and update demonstrations
"""

from .schema import TABLE
from ..report.display import display


def basic_select(conn) -> list:
    """Print every Employees row"""
    result = conn.execute(f"SELECT * FROM {TABLE}")
    display.section("All Employees")
    display.rows(result.rows)
    return result.rows


def update_with_statement(conn) -> int:
    """
    Increment BBB's age with a plain statement

    Returns:
        int: Number of rows updated
    """
    result = conn.execute(f"UPDATE {TABLE} SET age=age+1 WHERE first='BBB'")
    display.line(f"\nRows updated via plain statement: {result.rowcount}")
    return result.rowcount


def parameterized_select(conn, first: str = "EEE", min_age: int = 30) -> list:
    """
    Select rows matching two bound parameters

    The result is checked for a first row before it is scanned forward
    from the start.

    Args:
        conn: PlaygroundConnection
        first: Value bound to first=%s
        min_age: Value bound to age>=%s

    Returns:
        list: Matching rows
    """
    sql = f"SELECT id, first, last, age FROM {TABLE} WHERE first=%s AND age>=%s"
    matched = []

    with conn.scrollable(sql, (first, min_age)) as rs:
        display.section(f"Parameterized filter (first='{first}' AND age>={min_age})")
        if not rs.first():
            display.line("No records found.")
            return matched

        rs.before_first()
        for row in rs:
            display.row(row)
            matched.append(row)

    return matched


def generated_key_insert(conn) -> int:
    """
    Insert one row and report the key the server assigned to it

    Returns:
        int: Generated id
    """
    sql = f"INSERT INTO {TABLE}(first, last, age) VALUES (%s, %s, %s)"
    result = conn.execute(sql, ("NEW", "new", 22))
    key = result.lastrowid
    if key:
        display.line(f"\nGenerated key for NEW: {key}")
    return key


def scrollable_demo(conn) -> dict:
    """
    Walk an ordered result set with non-sequential cursor moves

    Returns:
        dict: Row visited at each step, keyed by step label
    """
    visited = {}

    with conn.scrollable(f"SELECT id, first FROM {TABLE} ORDER BY id") as rs:
        display.section("Scrollable cursor demo")
        if not rs.next():
            display.line("Empty.")
            return visited

        moves = [
            ("First", rs.first),
            ("Last", rs.last),
            ("Prev of last", rs.previous),
            ("Absolute(3)", lambda: rs.absolute(3)),
            ("Relative(-2)", lambda: rs.relative(-2)),
        ]
        for label, move in moves:
            if not move():
                display.line(f"{label}: no row")
                continue
            visited[label] = rs.row
            display.labelled_row(label, rs.row)

    return visited


def updatable_demo(conn, delete_position: int = 5) -> dict:
    """
    Change, delete and insert rows through an updatable result set

    Upper-cases `last` on the first row, deletes the row at
    `delete_position` if there is one, then inserts ('INS', 'ins', 35).

    Returns:
        dict: updated, deleted and inserted rows (None when skipped)
    """
    display.section("Updatable cursor demo")
    changes = {'updated': None, 'deleted': None, 'inserted': None}
    sql = f"SELECT id, first, last, age FROM {TABLE} ORDER BY id"

    with conn.updatable(sql, TABLE, key="id") as rs:
        if not rs.next():
            return changes

        rs.update("last", rs.get("last").upper())
        rs.update_row()
        changes['updated'] = rs.row

        if rs.absolute(delete_position):
            deleted = rs.row
            display.line(f"Deleting row id={rs.get('id')}")
            rs.delete_row()
            changes['deleted'] = deleted

        rs.move_to_insert_row()
        rs.update("first", "INS")
        rs.update("last", "ins")
        rs.update("age", 35)
        changes['inserted'] = rs.insert_row()
        rs.move_to_current_row()
        display.line(f"Inserted row id={changes['inserted'][0]}")

    return changes
