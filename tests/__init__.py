"""
Test suite for geometry-primitives

Contains:
- tests/unit/          : Unit tests for individual modules
"""
