"""Tests for forest queries and search."""

import pytest

from soltree.core.query import collect_ids, find_node, flatten, search, top_level_ids
from soltree.parsers.sections import parse_document
from soltree.parsers.tree_builder import build_tree
from soltree.utils.exceptions import NodeNotFoundError


@pytest.fixture
def forest(counter_trace):
    return parse_document(counter_trace)


def test_flatten_is_preorder(forest):
    contents = [node.content for node in flatten(forest)]
    assert contents[0] == "[24367] Counter::increment()"
    assert contents[1].startswith("[2261] Token::balanceOf")
    assert contents[2] == "← [Return] 100"
    assert contents[-1] == "← [Stop]"


def test_flatten_can_be_restarted(forest):
    assert list(flatten(forest)) == list(flatten(forest))


def test_collect_ids_covers_every_node(forest):
    ids = collect_ids(forest)
    assert len(ids) == 7
    assert ids[0] == forest[0].id


def test_top_level_ids(forest):
    assert top_level_ids(forest) == {forest[0].id}


def test_find_node(forest):
    node = find_node(forest, "trace-3")
    assert node.content.startswith("[5000] Proxy::forward")


def test_find_node_missing(forest):
    with pytest.raises(NodeNotFoundError) as excinfo:
        find_node(forest, "trace-999")
    assert excinfo.value.details == {"node_id": "trace-999"}


class TestSearch:
    def test_match_includes_ancestors(self, forest):
        result = search(forest, "emit")
        emit = next(n for n in flatten(forest) if n.content.startswith("emit"))
        expected = {emit.id} | {a.id for a in emit.ancestors()}
        assert result == expected
        assert len(result) == 3

    def test_case_insensitive(self, forest):
        assert search(forest, "TOKEN::BALANCEOF") == search(forest, "token::balanceof")

    def test_every_ancestor_of_a_match_is_included(self, forest):
        result = search(forest, "stop")
        for node in flatten(forest):
            if node.id in result:
                assert all(a.id in result for a in node.ancestors())

    @pytest.mark.parametrize("query", ["", "   ", None])
    def test_blank_query_matches_nothing(self, forest, query):
        assert search(forest, query) == set()

    def test_no_match(self, forest):
        assert search(forest, "selfdestruct") == set()

    def test_search_leaves_forest_unchanged(self, forest):
        before = [(n.id, n.content, len(n.children)) for n in flatten(forest)]
        search(forest, "return")
        after = [(n.id, n.content, len(n.children)) for n in flatten(forest)]
        assert before == after

    def test_search_relinks_parents(self):
        roots = build_tree(["root", "├─ child needle"])
        child = roots[0].children[0]
        child.parent = None
        # the walk links the child back before checking it
        assert search(roots, "needle") == {child.id, roots[0].id}
        assert child.parent is roots[0]
