"""Tests for argument splicing and positional formatting."""

from __future__ import annotations

import logging

import pytest
from hypothesis import given
from hypothesis import strategies as st

from culturelex.formatting import format_positional, splice_count


class TestSpliceCount:
    """The count always leads the final argument list."""

    def test_count_only(self) -> None:
        assert splice_count(3) == (3,)

    def test_count_then_extra(self) -> None:
        assert splice_count(3, ["x"]) == (3, "x")

    @given(count=st.integers(), extra=st.lists(st.integers() | st.text(max_size=3), max_size=5))
    def test_length(self, count: int, extra: list[object]) -> None:
        arguments = splice_count(count, extra)
        assert len(arguments) == 1 + len(extra)
        assert arguments[0] == count


class TestFormatPositional:
    """Composite-format compatible substitution."""

    def test_positional(self) -> None:
        assert format_positional("{1} has {0} items", [3, "Anna"]) == "Anna has 3 items"

    def test_escaped_braces(self) -> None:
        assert format_positional("{{0}} is {0}", [1]) == "{0} is 1"

    def test_no_placeholders(self) -> None:
        assert format_positional("plain", [1, 2]) == "plain"

    @pytest.mark.parametrize("template", ["{2}", "{name}", "{0", "{0.missing}"])
    def test_unformattable_returned_as_is(
        self, template: str, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.WARNING, logger="culturelex.formatting"):
            assert format_positional(template, [1]) == template
        assert len(caplog.records) == 1
