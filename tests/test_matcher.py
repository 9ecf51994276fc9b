"""Tests for glob pattern matching with captures."""

from __future__ import annotations

from boundary_classifier.matcher import capture, compile_pattern, is_match


class TestCapture:
    """Tests for the capture function."""

    def test_single_star_captures_segment(self) -> None:
        """Test that a whole-segment star captures the segment."""
        assert capture("components/*", "components/component-a") == ("component-a",)

    def test_single_star_does_not_cross_segments(self) -> None:
        """Test that a star never matches a separator."""
        assert capture("components/*", "components/a/b") is None

    def test_single_star_requires_a_segment(self) -> None:
        """Test that a whole-segment star does not match an empty segment."""
        assert capture("components/*", "components/") is None
        assert capture("components/*", "components") is None

    def test_literal_segments_must_match(self) -> None:
        """Test that literal segments are compared exactly."""
        assert capture("components/*", "modules/module-a") is None
        assert capture("a.js", "abjs") is None

    def test_globstar_matches_zero_segments(self) -> None:
        """Test that ** may match nothing and captures an empty string."""
        assert capture("components/*/**/*", "components/a/X.js") == ("a", "", "X.js")

    def test_globstar_matches_many_segments(self) -> None:
        """Test that ** captures every intermediate segment."""
        assert capture("components/*/**/*", "components/a/b/c/X.js") == ("a", "b/c", "X.js")

    def test_leading_globstar(self) -> None:
        """Test patterns starting with **."""
        assert capture("**/*.test.js", "a/b/x.test.js") == ("a/b", "x")
        assert capture("**/*.test.js", "x.test.js") == ("", "x")

    def test_trailing_globstar(self) -> None:
        """Test patterns ending with **."""
        assert capture("a/**", "a/b/c") == ("b/c",)
        assert capture("a/**", "a") == ("",)
        assert capture("a/**", "ab") is None

    def test_partial_segment_star(self) -> None:
        """Test a star inside a segment."""
        assert capture("helpers/*.js", "helpers/format.js") == ("format",)
        assert capture("helpers/*.js", "helpers/format.ts") is None

    def test_question_mark(self) -> None:
        """Test that ? captures a single character."""
        assert capture("file?.js", "file1.js") == ("1",)
        assert capture("file?.js", "file12.js") is None

    def test_character_class(self) -> None:
        """Test positive and negated character classes."""
        assert capture("[abc]x", "bx") == ("b",)
        assert capture("[!a]bc", "xbc") == ("x",)
        assert capture("[!a]bc", "abc") is None

    def test_braces(self) -> None:
        """Test literal alternation."""
        assert capture("*.{js,ts}", "index.ts") == ("index", "ts")
        assert capture("*.{js,ts}", "index.css") is None

    def test_regex_characters_are_literal(self) -> None:
        """Test that regex metacharacters in patterns have no special meaning."""
        assert capture("a+b/(c)", "a+b/(c)") == ()
        assert capture("a+b/(c)", "aab/c") is None

    def test_compiled_patterns_are_cached(self) -> None:
        """Test that compiling the same pattern twice returns the same object."""
        assert compile_pattern("modules/*") is compile_pattern("modules/*")


class TestIsMatch:
    """Tests for the is_match function."""

    def test_matches_any_pattern(self) -> None:
        """Test that one matching pattern is enough."""
        assert is_match("src/a.test.js", ["**/*.spec.js", "**/*.test.js"]) is True

    def test_no_patterns(self) -> None:
        """Test that nothing matches an empty pattern list."""
        assert is_match("src/a.js", []) is False

    def test_missing_candidate(self) -> None:
        """Test that a missing path never matches."""
        assert is_match(None, ["**"]) is False
        assert is_match("", ["**"]) is False
