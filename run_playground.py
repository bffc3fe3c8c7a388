"""
SQL Playground - Main Entry Point
Run this file to walk through the MySQL client API against the Employees table
"""

from sqlplayground.cli.commands import run


def main():
    """
    Main entry point; accepts the same options as `sqlplayground run`
    """
    run(prog_name="run_playground.py")


if __name__ == '__main__':
    main()
