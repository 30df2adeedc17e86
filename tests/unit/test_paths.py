"""
Unit tests for resolve_source_path.
"""

import pytest

from ccfilter.filters.paths import resolve_source_path


class TestResolveSourcePath:
    def test_absolute_unchanged(self):
        assert resolve_source_path("/a/b.c", "/x/y") == "/a/b.c"

    def test_relative_joined_to_cwd(self):
        assert resolve_source_path("b.c", "/x/y") == "/x/y/b.c"

    @pytest.mark.parametrize(
        "file,cwd,expected",
        [
            ("src/b.c", "/x", "/x/src/b.c"),
            ("./b.c", "/x", "/x/./b.c"),
            ("../b.c", "/x/y", "/x/y/../b.c"),
            ("b.c", "/x/", "/x//b.c"),
            ("b.c", "", "/b.c"),
        ],
    )
    def test_no_normalisation(self, file, cwd, expected):
        assert resolve_source_path(file, cwd) == expected
