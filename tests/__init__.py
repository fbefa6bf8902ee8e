"""
Test suite for xsd_integer

Contains:
- tests/unit/          : Unit tests for individual modules
"""
