"""
Core limb arithmetic, multiplication algorithms, and the integer value type.

This package has no dependency on the benchmark harness and performs
no I/O apart from loading JSON Schema contracts.
"""
