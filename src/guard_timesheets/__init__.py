"""Guard timesheets package.

Time-and-attendance rules, invoice line-item derivation and payroll
estimation for a security workforce back office. Organized by feature
modules (shifts, attendance, rules, billing, payroll, timesheets) with
a thin Flask controller layer over service/repository layers.
"""
