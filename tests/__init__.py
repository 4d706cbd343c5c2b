"""
Test suite for matrix-calc

Contains:
- tests/unit/          : Unit tests for individual modules
"""
