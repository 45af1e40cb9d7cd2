"""
Test suite for bigmul

Contains:
- tests/unit/          : Unit tests for limb primitives, decimal codec,
                         multiplication algorithms, BigInt, benchmark, contracts
"""
