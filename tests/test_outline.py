"""Tests for outline tree building."""

from __future__ import annotations

from conftest import make_records

from docmark.outline import build_outline, build_tree, count_nodes, flatten_outline
from docmark.schemas import OutlineNode


def _shape(forest: list[OutlineNode]) -> list:
    return [(node.content, _shape(node.children)) for node in forest]


class TestBuildOutline:
    """Tests for build_outline and build_tree."""

    def test_nests_by_level(self) -> None:
        """H1/H2/H3/H2 produces one root with two children."""
        forest = build_tree(make_records((1, "A"), (2, "B"), (3, "C"), (2, "D")))

        assert [node.to_dict() for node in forest] == [
            {
                "content": "A",
                "anchor": "a",
                "nodes": [
                    {
                        "content": "B",
                        "anchor": "b",
                        "nodes": [{"content": "C", "anchor": "c", "nodes": []}],
                    },
                    {"content": "D", "anchor": "d", "nodes": []},
                ],
            }
        ]

    def test_multiple_roots(self) -> None:
        """Every top-level heading becomes its own root."""
        forest = build_tree(make_records((1, "A"), (2, "A1"), (1, "B"), (1, "C")))

        assert _shape(forest) == [("A", [("A1", [])]), ("B", []), ("C", [])]

    def test_returns_next_unconsumed_index(self) -> None:
        """Stops at the first shallower heading without consuming it."""
        records = make_records((1, "A"), (2, "B"), (2, "C"), (1, "D"))

        forest, next_index = build_outline(records, start_level=2, start=1)

        assert [node.content for node in forest] == ["B", "C"]
        assert next_index == 3

    def test_empty_input(self) -> None:
        """An empty list builds an empty forest."""
        assert build_outline([]) == ([], 0)

    def test_level_skip_builds_at_deeper_level(self) -> None:
        """An H3 directly under an H1 becomes its child."""
        forest = build_tree(make_records((1, "A"), (3, "C"), (3, "D")))

        assert _shape(forest) == [("A", [("C", []), ("D", [])])]
        assert forest[0].children[0].level == 3

    def test_skipped_then_intermediate_level_keeps_both(self) -> None:
        """H1, H3, H2 keeps the H3 and the H2 under the H1."""
        forest = build_tree(make_records((1, "A"), (3, "B"), (2, "C")))

        assert _shape(forest) == [("A", [("B", []), ("C", [])])]

    def test_orphans_are_promoted(self) -> None:
        """Headings deeper than the first root are promoted, not dropped."""
        forest = build_tree(make_records((2, "X"), (3, "Y"), (1, "Z"), (2, "Z1")))

        assert _shape(forest) == [("X", [("Y", [])]), ("Z", [("Z1", [])])]

    def test_shallower_orphan_never_nests_under_deeper_one(self) -> None:
        """An H2 after an orphan H3 is a sibling, not its child."""
        forest = build_tree(make_records((3, "X"), (2, "Y")))

        assert _shape(forest) == [("X", []), ("Y", [])]

    def test_children_are_deeper_than_parent(self) -> None:
        """Every child's level is strictly greater than its parent's."""
        forest = build_tree(
            make_records((1, "A"), (2, "B"), (3, "C"), (3, "D"), (2, "E"), (1, "F"), (3, "G"))
        )

        def check(nodes: list[OutlineNode]) -> None:
            for node in nodes:
                for child in node.children:
                    assert child.level > node.level
                check(node.children)

        check(forest)
        assert count_nodes(forest) == 7


class TestFlattenOutline:
    """Tests for flatten_outline round trips."""

    def test_flatten_reproduces_source_order(self) -> None:
        """Depth-first flattening returns the original records."""
        records = make_records(
            (1, "A"), (2, "B"), (3, "C"), (2, "D"), (1, "E"), (2, "F"), (3, "G")
        )

        assert flatten_outline(build_tree(records)) == records

    def test_rebuild_is_isomorphic(self) -> None:
        """Building from a flattened tree yields the same tree."""
        forest = build_tree(make_records((1, "A"), (3, "B"), (2, "C"), (1, "D")))

        assert build_tree(flatten_outline(forest)) == forest

    def test_serialization_hides_level(self) -> None:
        """Serialized nodes expose content, anchor and nodes only."""
        forest = build_tree(make_records((1, "Getting Started")))

        assert forest[0].to_dict() == {
            "content": "Getting Started",
            "anchor": "getting-started",
            "nodes": [],
        }
