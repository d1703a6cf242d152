"""
Test suite for the math utility library

Contains:
- tests/unit/          : Unit tests for individual modules
"""
