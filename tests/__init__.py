"""
Test suite for crockford32

Contains:
- tests/unit/          : Unit tests for individual modules
"""
