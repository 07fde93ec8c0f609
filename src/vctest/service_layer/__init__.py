"""Service layer for vctest: the test runner.

Depends on `vctest.domain` and `vctest.interfaces` only; concrete reporters
are wired in by `vctest.bootstrap`.
"""
