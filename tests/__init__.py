"""
Test suite for daiji

Contains:
- tests/unit/          : Unit tests for individual modules
"""
