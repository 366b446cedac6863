"""
TagsInput tests -- trimming, duplicates, capacity, separators.
"""

from livecomponents.components import tagsinput
from livecomponents.kernel.dispatch import dispatch
from livecomponents.kernel.types import configure


class TestAdd:
    def test_add_trims(self):
        t = tagsinput.new("skills")
        assert t.add_tag("  go ")
        assert t.values() == ["go"]

    def test_blank_refused(self):
        t = tagsinput.new("skills")
        assert t.add_tag("   ") is False
        assert t.is_empty()

    def test_duplicate_refused(self):
        t = tagsinput.new("skills")
        t.add_tag("go")
        assert t.add_tag("go") is False
        assert t.count() == 1

    def test_duplicates_when_allowed(self):
        t = tagsinput.new("skills", configure(allow_duplicates=True))
        t.add_tag("go")
        assert t.add_tag("go")
        assert t.count() == 2

    def test_capacity(self):
        t = tagsinput.new("skills", configure(max_tags=2))
        t.add_tag("go")
        t.add_tag("python")
        assert t.add_tag("rust") is False
        assert t.values() == ["go", "python"]
        assert t.can_add_more() is False

    def test_add_clears_input(self):
        t = tagsinput.new("skills")
        t.input = "go"
        t.add_tag(t.input)
        assert t.input == ""


class TestRemove:
    def test_remove_by_value_and_index(self):
        t = tagsinput.new("skills", tagsinput.with_tags("a", "b", "c"))
        assert t.remove_tag("b")
        assert t.remove_tag("b") is False
        assert t.remove_tag_at(0)
        assert t.remove_tag_at(9) is False
        assert t.values() == ["c"]

    def test_remove_last(self):
        t = tagsinput.new("skills", tagsinput.with_tags("a", "b"))
        assert t.remove_last()
        assert t.values() == ["a"]
        t.clear()
        assert t.remove_last() is False


class TestInput:
    def test_separator_commits_pieces(self):
        t = tagsinput.new("skills")
        t.set_input("go, rust,")
        assert t.values() == ["go", "rust"]

    def test_custom_separators(self):
        t = tagsinput.new("skills", tagsinput.with_separators(";", " "))
        t.set_input("a;b")
        assert t.values() == ["a", "b"]

    def test_plain_input_is_kept(self):
        t = tagsinput.new("skills")
        t.set_input("pyth")
        assert t.input == "pyth"
        assert t.is_empty()

    def test_suggestions_prefix_match_excluding_tags(self):
        t = tagsinput.new(
            "skills",
            tagsinput.with_suggestions("Python", "PyTorch", "Go"),
            tagsinput.with_tags("PyTorch"),
        )
        t.set_input("py")
        assert t.filtered_suggestions() == ["Python"]
        assert t.to_context()["show_suggestions"] is True

    def test_no_suggestions_without_input(self):
        t = tagsinput.new("skills", tagsinput.with_suggestions("Python"))
        assert t.filtered_suggestions() == []


class TestActions:
    def test_add_uses_payload_or_input(self):
        t = tagsinput.new("skills")
        assert dispatch(t, "add_skills", {"value": "go"})
        t.input = "rust"
        assert dispatch(t, "add_skills")
        assert t.values() == ["go", "rust"]

    def test_duplicate_add_is_rejected(self):
        t = tagsinput.new("skills", tagsinput.with_tags("go"))
        result = dispatch(t, "add_skills", {"value": "go"})
        assert not result
        assert result.reason.startswith("REJECTED")
