"""Tests for story records, coercion and loading."""

from pathlib import Path

import pytest

from story_sort.core.exceptions import StoryFormatError, StorySortError
from story_sort.stories import Story, coerce_story, load_stories, story_fields


class TestStory:
    """Tests for the Story record."""

    def test_path_with_group(self) -> None:
        """Path joins group and name."""
        assert Story(1, "Components/Header", "Default").path == "Components/Header/Default"

    def test_path_without_group(self) -> None:
        """Ungrouped stories use the bare name."""
        assert Story(1, "", "Intro").path == "Intro"


class TestStoryFields:
    """Tests for story_fields."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (Story(1, "A", "b"), ("A", "b")),
            ({"group": "A", "name": "b"}, ("A", "b")),
            ({"kind": "A", "name": "b"}, ("A", "b")),
            ({"title": "A", "name": "b"}, ("A", "b")),
            (("id", {"kind": "A", "name": "b"}), ("A", "b")),
            (["id", {"kind": "A", "name": "b"}], ("A", "b")),
        ],
    )
    def test_accepted_shapes(self, value: object, expected: tuple[str, str]) -> None:
        """All supported shapes yield group and name."""
        assert story_fields(value) == expected

    def test_group_takes_precedence_over_kind(self) -> None:
        """'group' is preferred when several group fields are present."""
        assert story_fields({"group": "G", "kind": "K", "name": "n"}) == ("G", "n")

    @pytest.mark.parametrize("value", [None, 42, "story", ("only-one",), (1, 2)])
    def test_unrecognised_shapes_are_empty(self, value: object) -> None:
        """Unrecognised values degrade to empty fields."""
        assert story_fields(value) == ("", "")

    def test_non_string_fields_are_stringified(self) -> None:
        """Numbers (e.g. from YAML) become text."""
        assert story_fields({"group": 2024, "name": 1}) == ("2024", "1")


class TestCoerceStory:
    """Tests for coerce_story."""

    def test_story_passthrough(self) -> None:
        """Story instances are returned as-is."""
        original = Story("x", "A", "b")

        assert coerce_story(original) is original

    def test_mapping_with_id(self) -> None:
        """The id field of a mapping is kept."""
        assert coerce_story({"id": "s1", "kind": "A", "name": "b"}) == Story("s1", "A", "b")

    def test_pair_uses_first_item_as_id(self) -> None:
        """The first item of an (id, metadata) pair is the id."""
        assert coerce_story(("s1", {"kind": "A", "name": "b"})) == Story("s1", "A", "b")

    def test_default_id(self) -> None:
        """default_id fills in a missing id."""
        assert coerce_story({"name": "b"}, default_id=3) == Story(3, "", "b")
        assert coerce_story((None, {"name": "b"}), default_id=4) == Story(4, "", "b")

    def test_null_id_uses_default(self) -> None:
        """An explicit null id is treated like a missing one in every shape."""
        assert coerce_story({"id": None, "name": "b"}, default_id=5) == Story(5, "", "b")
        assert coerce_story([None, {"name": "b"}], default_id=5) == Story(5, "", "b")

    @pytest.mark.parametrize("value", [None, 42, "story", (1, 2, 3)])
    def test_invalid_raises(self, value: object) -> None:
        """Values with no story shape raise StoryFormatError."""
        with pytest.raises(StoryFormatError, match="Not a story"):
            coerce_story(value)


class TestLoadStories:
    """Tests for load_stories."""

    def test_yaml_list(self, write_yaml) -> None:
        """A YAML list of mappings loads in order, indexes filling missing ids."""
        path = write_yaml(
            "stories.yaml",
            "- kind: Articles\n  name: Intro\n"
            "- id: btn\n  group: Elements/Button\n  name: Default\n",
        )

        assert load_stories(path) == [
            Story(0, "Articles", "Intro"),
            Story("btn", "Elements/Button", "Default"),
        ]

    def test_json_pairs_under_stories_key(self, write_yaml) -> None:
        """JSON input with a 'stories' key and (id, metadata) pairs."""
        path = write_yaml(
            "stories.json",
            '{"stories": [["a", {"kind": "X", "name": "one"}], ["b", {"name": "two"}]]}',
        )

        assert load_stories(path) == [Story("a", "X", "one"), Story("b", "", "two")]

    def test_null_ids_get_index(self, write_yaml) -> None:
        """Mappings and pairs with a null id both fall back to their index."""
        path = write_yaml(
            "stories.yaml",
            "- id: null\n  name: First\n- [null, {name: Second}]\n",
        )

        assert load_stories(path) == [Story(0, "", "First"), Story(1, "", "Second")]

    def test_empty_file(self, write_yaml, caplog: pytest.LogCaptureFixture) -> None:
        """An empty file yields no stories and a warning."""
        path = write_yaml("stories.yaml", "")

        assert load_stories(path) == []
        assert "No stories found" in caplog.text

    def test_missing_file(self, tmp_path: Path) -> None:
        """A missing file raises StoryFormatError with the path."""
        path = tmp_path / "missing.yaml"

        with pytest.raises(StoryFormatError, match="not found") as exc_info:
            load_stories(path)
        assert exc_info.value.path == path

    def test_invalid_yaml(self, write_yaml) -> None:
        """Unparsable YAML raises StoryFormatError."""
        path = write_yaml("stories.yaml", "- [unclosed\n")

        with pytest.raises(StoryFormatError, match="Invalid YAML"):
            load_stories(path)

    def test_not_a_list(self, write_yaml) -> None:
        """A scalar document is rejected."""
        path = write_yaml("stories.yaml", "just text\n")

        with pytest.raises(StoryFormatError, match="Expected a list"):
            load_stories(path)

    def test_bad_item_reports_index(self, write_yaml) -> None:
        """An unrecognised item is reported with its position."""
        path = write_yaml("stories.yaml", "- name: ok\n- 42\n")

        with pytest.raises(StorySortError, match="Story #1"):
            load_stories(path)
