"""
Tests for RedirectRouter.

Patterns use placeholders or raw regex groups; targets use $N or are
callables receiving the captures.
"""

from __future__ import annotations

import logging

import pytest

from sitemeta.components.redirects import (
    RedirectRouter,
    ResolveRedirectInput,
    compile_pattern,
    fill_placeholders,
    normalize_path,
    run,
    run_resolve,
    to_url,
)
from sitemeta.core.errors import ConfigurationError

ERROR_PAGE = "<h1>Not found</h1>"


# --- Path and Pattern Tests ---


class TestNormalizePath:
    """Test path normalization."""

    def test_strips_slashes(self) -> None:
        assert normalize_path("/old/page/") == "old/page"

    def test_root_is_empty(self) -> None:
        assert normalize_path("/") == ""

    def test_none_is_empty(self) -> None:
        assert normalize_path(None) == ""


class TestCompilePattern:
    """Test placeholder expansion."""

    def test_any_matches_one_segment(self) -> None:
        regex = compile_pattern("old/(:any)")

        assert regex.match("old/page")
        assert not regex.match("old/a/b")

    def test_num(self) -> None:
        regex = compile_pattern("posts/(:num)")

        assert regex.match("posts/42")
        assert regex.match("posts/-1")
        assert not regex.match("posts/abc")

    def test_alpha(self) -> None:
        regex = compile_pattern("tag/(:alpha)")

        assert regex.match("tag/python")
        assert not regex.match("tag/py3")

    def test_all_spans_segments(self) -> None:
        match = compile_pattern("docs/(:all)").match("docs/a/b/c")

        assert match is not None
        assert match.group(1) == "a/b/c"

    def test_anchored(self) -> None:
        assert not compile_pattern("old").match("very/old")

    def test_surrounding_slashes_ignored(self) -> None:
        assert compile_pattern("/old/").match("old")

    def test_invalid_regex(self) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            compile_pattern("bad/(unclosed")
        assert exc_info.value.option == "redirects"


class TestFillPlaceholders:
    """Test $N substitution."""

    def test_positional(self) -> None:
        assert fill_placeholders("blog/$2/$1", ("a", "b")) == "blog/b/a"

    def test_ten_and_more_not_clobbered(self) -> None:
        """$10 is replaced before $1 can eat its prefix."""
        captures = tuple("abcdefghij")
        assert fill_placeholders("$10-$1", captures) == "j-a"

    def test_no_captures(self) -> None:
        assert fill_placeholders("new/$1", ()) == "new/$1"


class TestToUrl:
    """Test relative target expansion."""

    def test_relative(self) -> None:
        assert to_url("new/page", "https://example.com/") == "https://example.com/new/page"

    def test_root_relative(self) -> None:
        assert to_url("/new", "https://example.com") == "https://example.com/new"

    def test_absolute_kept(self) -> None:
        assert to_url("https://other.org/x", "https://example.com") == "https://other.org/x"
        assert to_url("//cdn.example.com/x", "https://example.com") == "//cdn.example.com/x"


# --- Router Tests ---


class TestRedirectRouterResolve:
    """Test resolution against ordered rules."""

    def test_string_target(self) -> None:
        router = RedirectRouter({"old/(:any)": "new/$1"})
        assert router.resolve("/old/page") == "new/page"

    def test_no_match(self) -> None:
        router = RedirectRouter({"old/(:any)": "new/$1"})
        assert router.resolve("/other") is None

    def test_first_match_wins(self) -> None:
        router = RedirectRouter({"blog/(:any)": "first/$1", "blog/special": "second"})
        assert router.resolve("blog/special") == "first/special"

    def test_callable_target_receives_captures(self) -> None:
        router = RedirectRouter({"(:num)/(:any)": lambda year, slug: f"blog/{year}/{slug}"})
        assert router.resolve("2024/hello") == "blog/2024/hello"

    def test_callable_result_gets_placeholders(self) -> None:
        router = RedirectRouter({"go/(:any)": lambda slug: "target/$1"})
        assert router.resolve("go/x") == "target/x"

    def test_raw_regex_group(self) -> None:
        router = RedirectRouter({"archive/([0-9]{4})": "years/$1"})
        assert router.resolve("archive/2023") == "years/2023"

    def test_external_target(self) -> None:
        router = RedirectRouter({"docs/(:all)": "https://docs.example.com/$1"})
        assert router.resolve("docs/a/b") == "https://docs.example.com/a/b"

    def test_callable_returning_non_string(self) -> None:
        router = RedirectRouter({"x": lambda: None})
        with pytest.raises(TypeError):
            router.resolve("x")

    def test_rules_in_order(self) -> None:
        router = RedirectRouter({"a": "1", "b": "2"})
        assert [rule.pattern for rule in router.rules] == ["a", "b"]


class TestRedirectRouterGo:
    """Test error page fallback."""

    def test_match_returns_target(self) -> None:
        router = RedirectRouter({"old": "new"})
        assert router.go("old", ERROR_PAGE) == "new"

    def test_unmatched_returns_error_page(self) -> None:
        assert RedirectRouter({"old": "new"}).go("nope", ERROR_PAGE) == ERROR_PAGE

    def test_no_rules_returns_error_page(self) -> None:
        assert RedirectRouter().go("anything", ERROR_PAGE) == ERROR_PAGE

    def test_exception_returns_error_page(self, caplog: pytest.LogCaptureFixture) -> None:
        """A failing target is logged, never raised."""

        def failing(slug: str) -> str:
            raise RuntimeError("lookup failed")

        router = RedirectRouter({"old/(:any)": failing})

        with caplog.at_level(logging.WARNING):
            result = router.go("old/page", ERROR_PAGE)

        assert result == ERROR_PAGE
        assert "Redirect resolution failed for old/page" in caplog.text


# --- Component Entry Points ---


class TestRunResolve:
    """Test redirects component entry points."""

    def test_resolved(self) -> None:
        output = run_resolve(ResolveRedirectInput(path="old/x"), redirects={"old/(:any)": "new/$1"})

        assert output.success is True
        assert output.target == "new/x"
        assert output.is_error_page is False

    def test_unmatched(self) -> None:
        output = run(ResolveRedirectInput(path="nope"), redirects={"old": "new"})

        assert output.success is True
        assert output.is_error_page is True

    def test_failure_reported(self) -> None:
        router = RedirectRouter({"x": lambda: 42})

        output = run_resolve(ResolveRedirectInput(path="x"), redirects=router)

        assert output.success is False
        assert output.target is None
        assert output.errors[0].code == "redirect_failed"

    def test_unknown_input(self) -> None:
        with pytest.raises(ValueError, match="Unknown input type"):
            run(object(), redirects={})  # type: ignore[arg-type]
