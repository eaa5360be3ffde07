"""
Test suite for lcg_predict

Contains:
- tests/unit/          : Unit tests for individual modules
"""
