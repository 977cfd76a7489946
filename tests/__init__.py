"""
Test suite for constant-term recovery

Contains:
- tests/unit/          : Unit tests for individual modules and the CLI
"""
