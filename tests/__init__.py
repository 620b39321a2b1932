"""
Test suite for netcalc

Contains:
- tests/unit/          : Unit tests for individual modules
"""
