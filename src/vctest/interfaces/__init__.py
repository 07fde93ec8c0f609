"""Interfaces (ports) for vctest.

Abstract contracts the service layer depends on; concrete implementations
live in `vctest.adapters`.
"""
