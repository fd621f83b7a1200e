"""
Test suite for ds_exercises

Contains:
- tests/unit/          : Unit tests for individual modules
"""
