"""Adapters (concrete implementations) for vctest interfaces and I/O."""
