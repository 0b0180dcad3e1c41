"""Tests for move notation."""

import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from checkers.core.notation import parse_move, format_move


class TestParseMove:
    def test_step(self):
        assert parse_move('c3-d4') == ([18, 27], False)

    def test_capture_chain(self):
        assert parse_move('c3xe5xc7') == ([18, 36, 50], True)

    def test_case_and_whitespace(self):
        assert parse_move('  C3-D4 ') == ([18, 27], False)

    @pytest.mark.parametrize("text", [
        "",
        "c3",
        "c3-",
        "c3-d4-e5",  # steps never chain
        "c3-e5xg7",  # mixed separators
        "i9-a1",
        "c3 d4",
    ])
    def test_invalid(self, text):
        with pytest.raises(ValueError):
            parse_move(text)


class TestFormatMove:
    def test_step(self):
        assert format_move([18, 27], False) == 'c3-d4'

    def test_capture_chain(self):
        assert format_move([18, 36, 50], True) == 'c3xe5xc7'

    def test_too_short(self):
        with pytest.raises(ValueError):
            format_move([18], True)

    def test_long_step(self):
        with pytest.raises(ValueError):
            format_move([18, 27, 36], False)
