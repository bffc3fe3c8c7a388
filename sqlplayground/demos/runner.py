"""
Demo runner: loads the driver, opens the connection and runs the steps in order
"""

from . import metadata, procedures, queries, schema, transactions
from ..core.connection import DRIVER_NAME, load_driver, open_connection
from ..report.display import display


# Later steps assume the rows left by earlier ones
STEPS = [
    ("schema", schema.setup_schema),
    ("seed", schema.insert_seed_data),
    ("basic_select", queries.basic_select),
    ("update", queries.update_with_statement),
    ("parameterized_select", queries.parameterized_select),
    ("generated_key", queries.generated_key_insert),
    ("scrollable", queries.scrollable_demo),
    ("updatable", queries.updatable_demo),
    ("savepoint", transactions.savepoint_demo),
    ("batch", transactions.batch_demo),
    ("callable", procedures.callable_demo),
    ("metadata", metadata.metadata_demo),
]

STEP_NAMES = [name for name, _ in STEPS]


def select_steps(names=None) -> list:
    """
    Steps to run, in demo order

    Args:
        names: Step names to keep, or None/empty for all steps

    Returns:
        list: (name, callable) pairs

    Raises:
        ValueError: If a name is not a known step
    """
    if not names:
        return list(STEPS)

    unknown = [name for name in names if name not in STEP_NAMES]
    if unknown:
        raise ValueError(f"Unknown step(s): {', '.join(unknown)}")

    wanted = set(names)
    return [(name, step) for name, step in STEPS if name in wanted]


def run_steps(conn, steps) -> dict:
    """
    Run steps on an open connection

    Returns:
        dict: Return value of each step, keyed by step name
    """
    results = {}
    for name, step in steps:
        results[name] = step(conn)
    return results


def run_all(config, step_names=None, create_procedure=False, echo_sql=False,
            journal_dir=None, driver_name=DRIVER_NAME) -> dict:
    """
    Run the demo sequence against one connection

    Args:
        config: DatabaseConfig
        step_names: Subset of STEP_NAMES to run (default: all)
        create_procedure: Create the display procedure before the steps
        echo_sql: Print every statement as it is executed
        journal_dir: Directory for committed statement journals (optional)
        driver_name: Driver module to load

    Returns:
        dict: Return value of each step, keyed by step name

    Raises:
        DriverNotFoundError: If the driver cannot be imported
        mysql.connector.Error: On any database error no step recovers from
    """
    steps = select_steps(step_names)
    driver = load_driver(driver_name)

    with open_connection(config, driver, journal_dir=journal_dir, echo_sql=echo_sql) as conn:
        if create_procedure:
            schema.create_display_procedure(conn)
        results = run_steps(conn, steps)

    display.line("\n--- DONE ---")
    return results
