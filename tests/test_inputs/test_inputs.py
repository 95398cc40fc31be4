"""Tests for stylesheet discovery."""
from __future__ import annotations

import pytest

from css_unity.errors import InvalidInputTypeError, MissingInputError
from css_unity.inputs import collect_stylesheets, split_input


@pytest.fixture
def css_dir(tmp_path):
    (tmp_path / "b.css").write_text("b{}")
    (tmp_path / "a.css").write_text("a{}")
    nested = tmp_path / "nested"
    nested.mkdir()
    (nested / "c.css").write_text("c{}")
    return tmp_path


class TestSplitInput:
    def test_comma_separated_string(self):
        assert split_input("a.css,b.css") == ["a.css", "b.css"]

    def test_list(self):
        assert split_input(["a.css", "b.css"]) == ["a.css", "b.css"]

    @pytest.mark.parametrize("value", ["", [], (), None])
    def test_empty_input(self, value):
        with pytest.raises(MissingInputError) as exc_info:
            split_input(value)
        assert exc_info.value.exit_code == 1

    @pytest.mark.parametrize("value", [42, {"a.css": 1}, object()])
    def test_invalid_type(self, value):
        with pytest.raises(InvalidInputTypeError) as exc_info:
            split_input(value)
        assert exc_info.value.exit_code == 2


class TestCollectStylesheets:
    def test_files_in_given_order(self, css_dir):
        paths = collect_stylesheets([str(css_dir / "b.css"), str(css_dir / "a.css")])
        assert [p.name for p in paths] == ["b.css", "a.css"]
        assert all(p.is_absolute() for p in paths)

    def test_directory_is_expanded_without_recursion(self, css_dir):
        paths = collect_stylesheets(str(css_dir))
        assert [p.name for p in paths] == ["a.css", "b.css"]

    def test_recursive_flag_is_not_implemented(self, css_dir):
        paths = collect_stylesheets(str(css_dir), recursive=True)
        assert "c.css" not in [p.name for p in paths]

    def test_missing_paths_skipped(self, css_dir):
        paths = collect_stylesheets(f"{css_dir / 'a.css'},{css_dir / 'nope.css'}")
        assert [p.name for p in paths] == ["a.css"]

    def test_blank_entries_skipped(self, css_dir):
        paths = collect_stylesheets(f"{css_dir / 'a.css'}, ,")
        assert [p.name for p in paths] == ["a.css"]

    def test_result_is_immutable(self, css_dir):
        assert isinstance(collect_stylesheets(str(css_dir)), tuple)
