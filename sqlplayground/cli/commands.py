"""
CLI commands for running the SQL playground
"""

import sys

import click
from mysql.connector import Error as MySQLError

from ..core.config import DatabaseConfig
from ..core.connection import load_driver, open_connection
from ..core.errors import DriverNotFoundError
from ..demos import runner, schema
from ..report.display import display


def connection_options(func):
    """Attach the shared connection options to a command"""
    options = [
        click.option('--env-file', type=click.Path(dir_okay=False),
                     help='.env file with PLAYGROUND_DB_* settings'),
        click.option('--password', '-p', default=None, help='MySQL password'),
        click.option('--user', '-u', default=None, help='MySQL user'),
        click.option('--database', '-d', default=None, help='MySQL database'),
        click.option('--port', type=int, default=None, help='MySQL port'),
        click.option('--host', default=None, help='MySQL host'),
    ]
    for option in options:
        func = option(func)
    return func


def build_config(host, port, database, user, password, env_file):
    """Defaults, then environment, then command-line values"""
    return DatabaseConfig.from_env(env_file).override(
        host=host, port=port, database=database, user=user, password=password
    )


def report_and_exit(exc):
    """Print a fatal error the way the playground reports it and exit 1"""
    if isinstance(exc, DriverNotFoundError):
        display.driver_missing(exc)
    else:
        display.error_chain(exc)
    sys.exit(1)


@click.group()
def cli():
    """SQL Playground - MySQL client API walkthrough"""
    pass


@cli.command()
@connection_options
@click.option('--step', '-s', 'steps', multiple=True,
              type=click.Choice(runner.STEP_NAMES), help='Run only this step (repeatable)')
@click.option('--create-procedure', is_flag=True,
              help='Create the display procedure before running')
@click.option('--echo-sql', is_flag=True, help='Print every statement as it runs')
@click.option('--journal-dir', type=click.Path(file_okay=False),
              help='Write committed statements to this directory')
def run(host, port, database, user, password, env_file, steps, create_procedure,
        echo_sql, journal_dir):
    """Run the demo sequence"""
    config = build_config(host, port, database, user, password, env_file)

    try:
        runner.run_all(
            config,
            step_names=list(steps),
            create_procedure=create_procedure,
            echo_sql=echo_sql,
            journal_dir=journal_dir,
        )
    except (DriverNotFoundError, MySQLError) as e:
        report_and_exit(e)


@cli.command()
@connection_options
def seed(host, port, database, user, password, env_file):
    """Create the Employees table and reset it to the seed rows"""
    config = build_config(host, port, database, user, password, env_file)

    try:
        with open_connection(config, load_driver()) as conn:
            schema.setup_schema(conn)
            inserted = schema.insert_seed_data(conn)
    except (DriverNotFoundError, MySQLError) as e:
        report_and_exit(e)

    print(f"✅ {inserted} seed rows in {schema.TABLE}")


@cli.command()
@connection_options
def show(host, port, database, user, password, env_file):
    """Print the current Employees rows"""
    config = build_config(host, port, database, user, password, env_file)

    try:
        with open_connection(config, load_driver()) as conn:
            employees = schema.fetch_employees(conn)
    except (DriverNotFoundError, MySQLError) as e:
        report_and_exit(e)

    if not employees:
        print(f"No rows in {schema.TABLE}.")
        return

    display.section(schema.TABLE)
    display.rows(employees)


@cli.command()
def steps():
    """List the demo steps in the order they run"""
    print("\n📋 Demo steps:\n")
    for index, name in enumerate(runner.STEP_NAMES, start=1):
        print(f"   {index:2d}. {name}")
    print()


if __name__ == '__main__':
    cli()
