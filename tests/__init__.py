"""
Test suite for numeric-helpers

Contains:
- tests/unit/          : Unit tests for individual modules
"""
