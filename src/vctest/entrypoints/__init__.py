"""Entrypoints (inbound adapters) for VCTEST.

Expose the framework to the outside world: the ``vctest`` CLI. Parse and
validate inputs, call the bootstrap layer, and present results.
"""
