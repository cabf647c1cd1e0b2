"""Tests for path parsing."""

import pytest

from dtomap import Path, parse_path


class TestParsePath:
    def test_simple_keys(self):
        assert parse_path("data.patient.id").segments == ("data", "patient", "id")

    def test_brackets_normalize_to_segments(self):
        assert parse_path("a.b[0].c") == parse_path("a.b.0.c")
        assert parse_path("items[2][3]").segments == ("items", "2", "3")

    def test_leading_index(self):
        assert parse_path("[1].name").segments == ("1", "name")

    def test_keys_may_contain_any_non_separator(self):
        assert parse_path("first name.e-mail").segments == ("first name", "e-mail")

    def test_segment_sequence(self):
        assert parse_path(["a", 0, "b"]).segments == ("a", "0", "b")

    def test_path_passes_through(self):
        path = Path(("a", "b"))
        assert parse_path(path) is path
        assert str(path) == "a.b"

    @pytest.mark.parametrize(
        "path_str",
        ["", "a..b", "a.", ".a", "a[", "a[x]", "a[-1]", "a[0]b", "a]"],
    )
    def test_invalid_strings(self, path_str):
        with pytest.raises(ValueError):
            parse_path(path_str)

    def test_invalid_segments(self):
        with pytest.raises(ValueError, match="Empty path"):
            parse_path([])
        with pytest.raises(TypeError):
            parse_path(["a", 1.5])
        with pytest.raises(TypeError):
            parse_path(["a", True])
