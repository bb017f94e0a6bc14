"""
Test suite for mobius-viz

Contains:
- tests/unit/          : Unit tests for individual modules
"""
