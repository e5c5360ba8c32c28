"""
Test suite for steprange

Contains:
- tests/unit/          : Unit tests for individual modules
"""
