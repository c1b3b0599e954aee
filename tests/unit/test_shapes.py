"""Unit tests for raw input shape classification."""

import pytest

from folio.contexts.normalization.shapes import (
    CategorizedSkillsShape,
    LegacyProjectShape,
    LegacySkillsShape,
    MalformedProjectShape,
    ModernProjectShape,
    classify_project,
    classify_skills,
    is_sequence,
    string_or_empty,
)


@pytest.mark.unit
@pytest.mark.parametrize(
    "value, expected",
    [
        (None, ""),
        ("text", "text"),
        ("  spaced ", "  spaced "),
        (2024, "2024"),
        (2024.0, "2024"),
        (3.5, "3.5"),
        (True, "true"),
        (False, "false"),
        ({"a": 1}, ""),
        (["a"], ""),
        (("a",), ""),
        (float("nan"), "nan"),
    ],
)
def test_string_or_empty(value, expected):
    """Test scalar coercion to text."""
    assert string_or_empty(value) == expected


@pytest.mark.unit
def test_string_or_empty_oversized_int():
    """Test that an int too long to convert to text coerces to "" instead of raising."""
    assert string_or_empty(10 ** 5000) == ""
    assert string_or_empty(-(10 ** 5000)) == ""


@pytest.mark.unit
def test_is_sequence():
    """Test that only lists and tuples count as sequences."""
    assert is_sequence([])
    assert is_sequence(("a",))
    assert not is_sequence("abc")
    assert not is_sequence({"a": 1})
    assert not is_sequence(None)


class TestClassifyProject:
    """Tests for project shape classification."""

    @pytest.mark.unit
    @pytest.mark.parametrize("key", ["title", "techStack", "liveUrl", "githubUrl"])
    def test_modern_key_makes_modern_shape(self, key):
        """Test that any modern-only key marks the project as modern."""
        assert isinstance(classify_project({key: "x"}), ModernProjectShape)

    @pytest.mark.unit
    def test_name_only_is_legacy(self):
        """Test that a mapping without modern keys is legacy."""
        shape = classify_project({"name": "Old", "description": "d"})

        assert isinstance(shape, LegacyProjectShape)
        assert shape.raw["name"] == "Old"

    @pytest.mark.unit
    def test_empty_mapping_is_legacy(self):
        """Test that an empty mapping is treated as a legacy project."""
        assert isinstance(classify_project({}), LegacyProjectShape)

    @pytest.mark.unit
    @pytest.mark.parametrize("raw", [None, "project", 12, ["title"]])
    def test_non_mapping_is_malformed(self, raw):
        """Test that non-mappings are malformed."""
        assert isinstance(classify_project(raw), MalformedProjectShape)


class TestClassifySkills:
    """Tests for skills shape classification."""

    @pytest.mark.unit
    def test_non_blank_category_wins(self):
        """Test that one non-blank category entry selects categorized skills."""
        shape = classify_skills({"soft": ["Mentoring"]}, "Go")

        assert isinstance(shape, CategorizedSkillsShape)
        assert shape.categories["soft"] == ["Mentoring"]
        assert shape.categories["technical"] == []

    @pytest.mark.unit
    def test_numeric_entry_counts_as_non_blank(self):
        """Test that entries are judged by their text form."""
        assert isinstance(classify_skills({"technical": [5]}, ""), CategorizedSkillsShape)

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "categories",
        [None, "Go", {}, {"technical": ["", "  "]}, {"technical": "Go, Rust"}, {"other": ["Go"]}],
    )
    def test_unusable_categories_fall_back_to_legacy(self, categories):
        """Test that missing, blank or wrong-typed categories select the legacy string."""
        shape = classify_skills(categories, "Go, Rust")

        assert isinstance(shape, LegacySkillsShape)
        assert shape.legacy == "Go, Rust"
