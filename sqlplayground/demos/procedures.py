"""
Stored procedure call demonstration
"""

from mysql.connector import Error as MySQLError

from ..report.display import display


PROCEDURE_NAME = "display"


def callable_demo(conn, first: str = "AAA"):
    """
    Call display(IN first, OUT p) and print its rows and OUT value

    A missing procedure (or any other driver error) is reported and the
    demo carries on.

    Args:
        conn: PlaygroundConnection
        first: Value for the IN parameter

    Returns:
        The OUT parameter value, or None if the call failed
    """
    display.section("Stored procedure demo")

    try:
        result_args, result_sets = conn.callproc(PROCEDURE_NAME, (first, 0))
    except MySQLError as e:
        display.line(f"Stored procedure not found or error calling it: {e}")
        return None

    for rows in result_sets:
        for row in rows:
            display.line("SP row -> " + " ".join(str(v) for v in row))

    out_value = result_args[1]
    display.line(f"OUT param p = {out_value}")
    return out_value
