"""Integrations subpackage for structural-compare.

Contains integration adapters for external frameworks:
- pytest plugin (auto-discovered via pytest11 entry point), providing the
  ``assert_same`` fixture

The plugin module is loaded by pytest itself and is not imported here, so
importing structural_compare never pulls in pytest.
"""

from __future__ import annotations

__all__: list[str] = []
