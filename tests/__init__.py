"""
Test package marker.

Lets pytest import test modules as `tests.test_*` without name clashes.
"""
