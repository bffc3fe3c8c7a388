"""
Employees schema, seed rows and the optional stored procedure
"""

from collections import namedtuple

from ..report.display import display


TABLE = "Employees"

Employee = namedtuple('Employee', ['id', 'first', 'last', 'age'])

SEED_ROWS = [
    ('AAA', 'aaa', 21),
    ('BBB', 'bbb', 32),
    ('CCC', 'ccc', 43),
    ('DDD', 'ddd', 27),
    ('EEE', 'eee', 30),
]

CREATE_TABLE_SQL = """
    CREATE TABLE IF NOT EXISTS Employees (
        id    INT PRIMARY KEY AUTO_INCREMENT,
        first VARCHAR(50),
        last  VARCHAR(50),
        age   INT
    )
"""

DISPLAY_PROCEDURE_SQL = """
    CREATE PROCEDURE display(IN f VARCHAR(50), OUT p INT)
    BEGIN
        SELECT id, first, last, age FROM Employees WHERE first = f;
        SELECT COUNT(*) INTO p FROM Employees WHERE first = f;
    END
"""


def setup_schema(conn):
    """Create the Employees table if it does not exist"""
    conn.execute(CREATE_TABLE_SQL)
    display.line("Schema ready.")


def insert_seed_data(conn) -> int:
    """
    Replace every row of Employees with the fixed seed rows

    Args:
        conn: PlaygroundConnection

    Returns:
        int: Number of rows inserted
    """
    conn.execute(f"DELETE FROM {TABLE}")

    placeholders = ", ".join(["(%s, %s, %s)"] * len(SEED_ROWS))
    params = [value for row in SEED_ROWS for value in row]
    result = conn.execute(
        f"INSERT INTO {TABLE}(first, last, age) VALUES {placeholders}", params
    )
    display.line("Seed data inserted.")
    return result.rowcount


def create_display_procedure(conn):
    """(Re)create the display(IN f, OUT p) procedure used by the call demo"""
    conn.execute("DROP PROCEDURE IF EXISTS display")
    conn.execute(DISPLAY_PROCEDURE_SQL)
    display.line("Procedure display(IN, OUT) ready.")


def fetch_employees(conn, where: str = None, params=None) -> list:
    """
    Read Employees rows ordered by id

    Args:
        conn: PlaygroundConnection
        where: Optional WHERE clause body with %s placeholders
        params: Values for the placeholders

    Returns:
        list: Employee tuples
    """
    sql = f"SELECT id, first, last, age FROM {TABLE}"
    if where:
        sql += f" WHERE {where}"
    sql += " ORDER BY id"
    result = conn.execute(sql, params)
    return [Employee(*row) for row in result.rows]
