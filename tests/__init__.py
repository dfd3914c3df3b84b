"""
Test suite for subunit-math

Contains:
- tests/unit/          : Unit tests for individual modules
"""
