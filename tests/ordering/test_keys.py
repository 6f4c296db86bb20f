"""Tests for story path decomposition."""

import pytest

from story_sort.ordering.keys import PathKey, decompose, make_key


class TestMakeKey:
    """Tests for make_key."""

    def test_lookup_is_lower_cased(self) -> None:
        """Lookup form is lower-cased, display form is preserved."""
        assert make_key("Getting Started") == PathKey("Getting Started", "getting started")

    def test_none_becomes_empty(self) -> None:
        """None is treated as an empty string."""
        assert make_key(None) == PathKey("", "")


class TestDecompose:
    """Tests for decompose."""

    def test_group_segments_then_name(self) -> None:
        """Group segments come first, in order, followed by the name."""
        keys = decompose("Components/Navigation/Header", "With Search")

        assert [k.display for k in keys] == ["Components", "Navigation", "Header", "With Search"]
        assert [k.lookup for k in keys] == ["components", "navigation", "header", "with search"]

    def test_empty_group_yields_single_empty_segment(self) -> None:
        """An ungrouped story still has one (empty) group level."""
        assert decompose("", "Story") == (PathKey("", ""), PathKey("Story", "story"))

    @pytest.mark.parametrize(
        "group,name",
        [
            ("", ""),
            (None, None),
            ("A", ""),
            ("A/B/C/D", "x"),
        ],
    )
    def test_always_at_least_two_keys(self, group: str | None, name: str | None) -> None:
        """Every story decomposes into at least a group level and a name."""
        assert len(decompose(group, name)) >= 2

    def test_empty_segments_pass_through(self) -> None:
        """Doubled and trailing separators are not cleaned up."""
        keys = decompose("A//B/", "Story")

        assert [k.lookup for k in keys] == ["a", "", "b", "", "story"]

    def test_unusual_characters_preserved(self) -> None:
        """Non-ASCII text is kept for display and lower-cased for lookup."""
        keys = decompose("Ärger", "ÜBER")

        assert keys[0] == PathKey("Ärger", "ärger")
        assert keys[1] == PathKey("ÜBER", "über")
