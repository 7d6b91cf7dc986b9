"""Employee Portal package.

This package is organized by feature modules (employees, attendance, tasks, ...)
with a thin Flask controller layer and service/repository layers underneath.
"""
