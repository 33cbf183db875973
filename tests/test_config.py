"""Tests for fa.config.Options."""

from __future__ import annotations

import dataclasses
import re

import pytest

from fa.config import Options


class TestFromPatterns:
    def test_compiles_patterns_in_order(self) -> None:
        options = Options.from_patterns(["err", r"warn\w+"])
        assert [t.pattern for t in options.triggers] == ["err", r"warn\w+"]
        assert all(isinstance(t, re.Pattern) for t in options.triggers)

    def test_defaults(self) -> None:
        options = Options.from_patterns(["x"])
        assert options.restart_on_find is False
        assert options.clear_on_restart is False
        assert options.history_lines == 0
        assert options.label_headers is False
        assert options.reserved_rows == 1

    def test_invalid_pattern_raises(self) -> None:
        with pytest.raises(re.error):
            Options.from_patterns(["(unclosed"])


class TestValidation:
    def test_requires_a_pattern(self) -> None:
        with pytest.raises(ValueError, match="at least one pattern"):
            Options.from_patterns([])

    def test_negative_history_rejected(self) -> None:
        with pytest.raises(ValueError, match="history_lines"):
            Options.from_patterns(["x"], history_lines=-1)

    def test_negative_reserved_rows_rejected(self) -> None:
        with pytest.raises(ValueError, match="reserved_rows"):
            Options.from_patterns(["x"], reserved_rows=-2)

    def test_options_are_immutable(self) -> None:
        options = Options.from_patterns(["x"])
        with pytest.raises(dataclasses.FrozenInstanceError):
            options.history_lines = 3
