"""
Core arbitrary-precision arithmetic and result models.

This package is independent of the command line: no process exits,
no printing, no logging configuration.
"""
