"""HR metrics package.

Organized by feature modules (attendance, leave, payroll) with pure
calculation units at the core and thin service/repository layers around them.
"""
