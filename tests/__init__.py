"""
Test suite for the BigInt arithmetic package

Contains:
- tests/unit/          : Unit and property tests for digits, BigInt, BigIntCell
"""
