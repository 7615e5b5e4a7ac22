"""
Test suite for numops

Contains:
- tests/unit/          : Unit tests for individual modules
"""
