"""
Demo steps run against the Employees table
"""
