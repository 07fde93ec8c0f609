"""VCTEST test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- integration/  : Several layers wired together (registry + runner + reporter).
- e2e/          : The ``vctest`` CLI invoked end-to-end through Click's CliRunner.
- helpers/      : Shared fakes and utilities (no tests here).

General guidance
- Keep unit fast and deterministic; prefer fakes (clock, reporter) over mocks.
- Never register into the process-wide registry without the
  ``fresh_default_registry`` fixture.
- Markers: unit, integration, e2e (applied per top-level folder by the root conftest hook).
"""
