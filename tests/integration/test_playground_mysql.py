import pytest

from sqlplayground.core.errors import EXECUTE_FAILED
from sqlplayground.demos import metadata, procedures, queries, runner, schema, transactions

pytestmark = pytest.mark.integration


def reset(conn):
    schema.setup_schema(conn)
    schema.insert_seed_data(conn)


def ages(conn):
    return {e.first: e.age for e in schema.fetch_employees(conn)}


def test_seed_is_idempotent(live_conn):
    for _ in range(2):
        reset(live_conn)

    employees = schema.fetch_employees(live_conn)
    assert [(e.first, e.last, e.age) for e in employees] == schema.SEED_ROWS


def test_update_then_parameterized_lookup(live_conn):
    reset(live_conn)

    queries.update_with_statement(live_conn)

    assert schema.fetch_employees(live_conn, "first=%s", ("BBB",))[0].age == 33


def test_generated_key_increases(live_conn):
    reset(live_conn)
    before = max(e.id for e in schema.fetch_employees(live_conn))

    assert queries.generated_key_insert(live_conn) > before


def test_scrollable_positions_follow_id_order(live_conn):
    reset(live_conn)
    ids = [e.id for e in schema.fetch_employees(live_conn)]

    visited = queries.scrollable_demo(live_conn)

    assert [visited[k][0] for k in ("First", "Last", "Prev of last", "Absolute(3)", "Relative(-2)")] == \
        [ids[0], ids[-1], ids[-2], ids[2], ids[0]]


def test_updatable_cursor_effects(live_conn):
    reset(live_conn)
    fifth = schema.fetch_employees(live_conn)[4]

    queries.updatable_demo(live_conn)

    employees = schema.fetch_employees(live_conn)
    assert employees[0].last == "AAA"
    assert fifth.id not in [e.id for e in employees]
    assert any(e.first == "INS" for e in employees)


def test_savepoint_keeps_first_update_only(live_conn):
    reset(live_conn)

    transactions.savepoint_demo(live_conn)

    result = ages(live_conn)
    assert result["AAA"] == 31
    assert result["EEE"] == 30


def test_batch_is_rolled_back(live_conn):
    reset(live_conn)

    counts = transactions.batch_demo(live_conn)

    assert counts[-1] == EXECUTE_FAILED
    assert ages(live_conn)["AAA"] == 21


def test_procedure_call_round_trip(live_conn):
    reset(live_conn)
    schema.create_display_procedure(live_conn)

    assert procedures.callable_demo(live_conn, first="AAA") == 1


def test_metadata_lists_employee_columns(live_conn):
    reset(live_conn)

    info = metadata.metadata_demo(live_conn)

    assert [name for name, _ in info["columns"]] == ["id", "first", "last", "age"]


def test_full_run(mysql_config):
    results = runner.run_all(mysql_config, create_procedure=True)

    assert list(results) == runner.STEP_NAMES
    assert results["callable"] == 1
