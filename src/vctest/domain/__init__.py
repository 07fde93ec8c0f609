"""Domain layer for vctest: test cases, the registry, signals and outcomes.

Pure Python with no I/O; every other layer may import from here.
"""
