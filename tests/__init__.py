"""
Test suite for digit-ring

Contains:
- tests/unit/          : Unit tests for individual modules
"""
