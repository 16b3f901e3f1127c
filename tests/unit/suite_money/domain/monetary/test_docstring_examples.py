from __future__ import annotations

import doctest

import pytest

from suite_money.domain.monetary import allocation, amount


@pytest.mark.parametrize("module", [allocation, amount], ids=lambda module: module.__name__)
def test_docstring_examples(module):
    """Verify that the `Examples:` sections in module docstrings hold."""
    result = doctest.testmod(module)

    assert result.attempted > 0
    assert result.failed == 0
