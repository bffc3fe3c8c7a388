"""
Database and result-set metadata introspection
"""

from mysql.connector import FieldType

from .schema import TABLE
from ..cursors.scrollable import ScrollableResultSet
from ..report.display import display


def product_name(server_version: str) -> str:
    """
    Server product from its version string

    Args:
        server_version: e.g. '8.0.36', '10.11.6-MariaDB', '8.0.11-TiDB-v7.5.0'
    """
    version = (server_version or "").lower()
    if "mariadb" in version:
        return "MariaDB"
    if "tidb" in version:
        return "TiDB"
    return "MySQL"


def column_types(description) -> list:
    """
    (name, type name) pairs from a cursor description

    Args:
        description: DB-API cursor description

    Returns:
        list: Tuples of column name and MySQL type name
    """
    columns = []
    for column in description or ():
        type_name = FieldType.get_info(column[1]) or str(column[1])
        columns.append((column[0], type_name))
    return columns


def supported_cursor_types() -> dict:
    """Cursor types the result-set layer supports"""
    return {
        'forwardOnly': ScrollableResultSet.FORWARD_ONLY,
        'scrollInsensitive': ScrollableResultSet.SCROLL_INSENSITIVE,
        'scrollSensitive': ScrollableResultSet.SCROLL_SENSITIVE,
    }


def metadata_demo(conn) -> dict:
    """
    Print server, connection and result-set metadata

    Returns:
        dict: The values printed
    """
    display.section("Metadata demo")

    version = conn.server_version
    info = {
        'product': product_name(version),
        'version': version,
        'user': conn.user_name(),
        'url': conn.config.url,
    }
    display.line(f"DB Product: {info['product']}")
    display.line(f"DB Version: {info['version']}")
    display.line(f"User: {info['user']}")
    display.line(f"URL: {info['url']}")

    result = conn.execute(f"SELECT * FROM {TABLE} LIMIT 1")
    info['columns'] = column_types(result.description)
    display.line(f"Column count: {len(info['columns'])}")
    for index, (name, type_name) in enumerate(info['columns'], start=1):
        display.line(f"  #{index} {name} ({type_name})")

    info['supports'] = supported_cursor_types()
    display.line("Supports: " + ", ".join(f"{k}={v}" for k, v in info['supports'].items()))
    return info
