"""
Test suite for proto-primitives

Contains:
- tests/unit/  : Unit tests for individual primitives and shared conformance suites
"""
