"""
SQL Playground - walkthrough of the MySQL client API against an Employees table
"""

__version__ = "0.1.0"
