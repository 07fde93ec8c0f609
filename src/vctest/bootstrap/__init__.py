"""Bootstrap (composition root) for VCTEST.

Assembles the runner at runtime: wires a registry and a concrete reporter to
the service-layer `TestRunner`.

Import rules:
- Entry points import *this* package (not adapters/service_layer/interfaces).
- Inner layers must not import `vctest.bootstrap`.
"""

from .bootstrap import build_runner, run_all_tests

__all__ = ["build_runner", "run_all_tests"]
