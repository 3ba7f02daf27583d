"""Farm Attendance package.

Feature modules (time_categories, payroll, ...) keep the business rules in
plain services and pure functions; storage and transport stay outside.
"""
