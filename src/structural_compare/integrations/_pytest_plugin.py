"""pytest plugin for structural-compare.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import pytest

from structural_compare import CompareOptions, different


@pytest.fixture(scope="session")
def assert_same() -> Any:
    """Fixture that returns a callable structural-equality asserter.

    The fixture is session-scoped because the returned callable is stateless
    (delegates to different() which creates a fresh DeepComparator per call).

    Usage in tests::

        def test_payload(assert_same):
            assert_same(build_payload(), {"id": 1, "tags": ["a"]})

        def test_ignores_timestamps(assert_same):
            assert_same(a, b, options={"top_level_ignore": ["created_at"]})

    Returns:
        A callable ``_assert(actual, expected, options=None) -> None`` that
        raises ``AssertionError`` when the values differ.
    """

    def _assert(
        actual: Any,
        expected: Any,
        options: CompareOptions | Mapping[str, Any] | None = None,
    ) -> None:
        """Assert that two values are structurally equal.

        Args:
            actual:   The value produced by the code under test.
            expected: The expected/reference value.
            options:  Optional comparison options, forwarded unchanged.

        Raises:
            AssertionError: When the values differ, with a message including
                the actual and expected values and the options used.
        """
        if different(actual, expected, options=options):
            raise AssertionError(
                f"Values are not structurally equal\n"
                f"  actual:   {actual!r}\n"
                f"  expected: {expected!r}\n"
                f"  options:  {options!r}"
            )

    return _assert
