"""Tests for routetree.paths — normalization and mount path recovery."""

import re

from routetree.paths import literal_prefix_from, normalize
from routetree.routing.pattern import compile_path


class TestNormalize:
    def test_collapses_repeated_slashes(self) -> None:
        assert normalize("/api//users") == "/api/users"
        assert normalize("//") == "/"

    def test_resolves_dot_segments(self) -> None:
        assert normalize("/api/./users") == "/api/users"
        assert normalize("/api/v1/../v2") == "/api/v2"

    def test_never_climbs_above_root(self) -> None:
        assert normalize("/..") == "/"
        assert normalize("/a/../../b") == "/b"

    def test_keeps_trailing_slash(self) -> None:
        assert normalize("/api/") == "/api/"
        assert normalize("/api/../v2/") == "/v2/"

    def test_root(self) -> None:
        assert normalize("/") == "/"

    def test_relative(self) -> None:
        assert normalize("a/../../b") == "../b"
        assert normalize("a/..") == "."

    def test_empty(self) -> None:
        assert normalize("") == "."


class TestLiteralPrefixFrom:
    def test_plain_mount(self) -> None:
        pattern, _ = compile_path("/api", end=False)
        assert literal_prefix_from(pattern) == "/api/"

    def test_nested_segments(self) -> None:
        pattern, _ = compile_path("/api/v1", end=False)
        assert literal_prefix_from(pattern) == "/api/v1/"

    def test_root_mount(self) -> None:
        pattern, _ = compile_path("/", end=False)
        assert literal_prefix_from(pattern) == "/"

    def test_escaped_characters(self) -> None:
        pattern, _ = compile_path("/user-admin.v2", end=False)
        assert literal_prefix_from(pattern) == "/user-admin.v2/"

    def test_accepts_source_string(self) -> None:
        assert literal_prefix_from(r"^\/api\/?(?=\/|$)") == "/api/"

    def test_ignores_regex_flags(self) -> None:
        pattern = re.compile(r"^\/Api\/?(?=\/|$)", re.IGNORECASE)
        assert literal_prefix_from(pattern) == "/Api/"

    def test_parameterized_mount_is_lossy(self) -> None:
        """Capture groups survive, minus their escapes and carets."""
        pattern, _ = compile_path("/users/:id", end=False)
        assert literal_prefix_from(pattern) == "/users/(?:([/]+?))/"
