"""
Test suite for big_mult

Contains:
- tests/unit/          : Unit tests for the BigInt engine, result model and CLI
"""
