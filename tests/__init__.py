"""
Test suite for prettyscale

Contains:
- tests/unit/          : Unit tests for individual modules
"""
