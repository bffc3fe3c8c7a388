import pytest
from mysql.connector.errors import InterfaceError

from sqlplayground.cursors.scrollable import ScrollableResultSet


ROWS = [(1, "AAA"), (2, "BBB"), (3, "CCC"), (4, "DDD"), (5, "EEE")]


@pytest.fixture
def rs():
    return ScrollableResultSet(("id", "first"), ROWS)


def test_starts_before_first(rs):
    assert rs.is_before_first
    assert rs.row_number == 0
    with pytest.raises(InterfaceError):
        rs.row


def test_first_last_previous(rs):
    assert rs.first() and rs.row == (1, "AAA")
    assert rs.last() and rs.row == (5, "EEE")
    assert rs.previous() and rs.row == (4, "DDD")


def test_absolute_and_relative(rs):
    assert rs.absolute(3) and rs.row == (3, "CCC")
    assert rs.relative(-2) and rs.row == (1, "AAA")
    assert rs.absolute(-1) and rs.row == (5, "EEE")
    assert rs.absolute(-5) and rs.row == (1, "AAA")


def test_moves_off_either_end(rs):
    assert not rs.absolute(0)
    assert rs.is_before_first
    assert not rs.absolute(-6)
    assert rs.is_before_first
    assert not rs.absolute(9)
    assert rs.is_after_last
    assert rs.previous() and rs.row == (5, "EEE")
    rs.first()
    assert not rs.relative(-3)
    assert rs.is_before_first


def test_iteration_resumes_from_position(rs):
    rs.absolute(3)

    assert list(rs) == [(4, "DDD"), (5, "EEE")]
    assert rs.is_after_last


def test_before_first_rewinds(rs):
    list(rs)
    rs.before_first()

    assert [row[0] for row in rs] == [1, 2, 3, 4, 5]


def test_get_by_name_and_index(rs):
    rs.absolute(2)

    assert rs.get("first") == "BBB"
    assert rs.get("FIRST") == "BBB"
    assert rs.get(1) == 2
    with pytest.raises(InterfaceError):
        rs.get("age")
    with pytest.raises(InterfaceError):
        rs.get(3)


def test_empty_result():
    rs = ScrollableResultSet(("id",), [])

    assert not rs.next()
    assert not rs.first()
    assert not rs.last()
    assert not rs.is_before_first
    assert len(rs) == 0


def test_closed_result_set_rejects_moves(rs):
    with rs:
        rs.first()

    with pytest.raises(InterfaceError):
        rs.next()


def test_from_query_buffers_rows(seeded):
    with seeded.scrollable("SELECT first FROM Employees ORDER BY id") as rs:
        assert len(rs) == 5
        assert rs.column_names == ("first",)
        assert rs.last() and rs.get("first") == "EEE"
