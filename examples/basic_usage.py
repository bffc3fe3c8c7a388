"""
Basic usage example for SQL Playground as a library
"""

from sqlplayground.core import DatabaseConfig, open_connection
from sqlplayground.demos import schema


def main():
    """
    Seeds the table, then walks it with a scrollable and an updatable cursor
    """
    config = DatabaseConfig.from_env()

    with open_connection(config) as conn:
        schema.setup_schema(conn)
        schema.insert_seed_data(conn)

        # Scroll backwards from the end
        with conn.scrollable("SELECT id, first, age FROM Employees ORDER BY id") as rs:
            rs.after_last()
            while rs.previous():
                print(rs.row)

        # Raise everyone's age by one through the cursor
        with conn.updatable("SELECT id, age FROM Employees", "Employees") as rs:
            for _ in rs:
                rs.update("age", rs.get("age") + 1)
                rs.update_row()

        # A transaction that keeps only the work before the savepoint
        with conn.transaction():
            conn.execute("UPDATE Employees SET age=0 WHERE first='AAA'")
            conn.set_savepoint("before_ccc")
            conn.execute("DELETE FROM Employees WHERE first='CCC'")
            conn.rollback_to_savepoint("before_ccc")
            conn.commit()

        for employee in schema.fetch_employees(conn):
            print(employee)


if __name__ == '__main__':
    main()
