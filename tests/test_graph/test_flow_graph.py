"""
Tests for Flow Graph Module

Tests for updl/graph/flow_graph.py
"""

import pytest

from updl.core.config import CompilerConfig, set_config
from updl.core.constants import NodeKind
from updl.core.exceptions import NodeNotFoundError
from updl.graph.flow_graph import FlowGraph, get_ending_nodes
from updl.models.nodes import FlowEdge, FlowNode, parse_nodes


class TestFlowGraph:
    """Tests for FlowGraph class."""

    def test_create_empty_graph(self):
        """Test creating an empty graph."""
        graph = FlowGraph([], [])

        assert graph.node_count == 0
        assert graph.edge_count == 0
        assert graph.nodes == []

    def test_nodes_keep_editor_order(self, make_graph, make_node):
        graph = make_graph([
            make_node("b", "Object"),
            make_node("a", "Entity"),
            make_node("c", "Space"),
        ])

        assert [node.id for node in graph.nodes] == ["b", "a", "c"]
        assert [node.id for node in graph.get_nodes_by_kind(NodeKind.ENTITY)] == ["a"]

    def test_duplicate_id_first_wins(self, make_graph, make_node):
        """Test that the first node with an id is the one looked up."""
        graph = make_graph([
            make_node("x", "Object"),
            make_node("x", "Camera"),
        ])

        assert graph.node_count == 1
        assert graph.get_node("x").kind is NodeKind.OBJECT

    def test_get_node_missing(self, make_graph):
        graph = make_graph([])

        with pytest.raises(NodeNotFoundError):
            graph.get_node("ghost")
        assert graph.find_node("ghost") is None
        assert graph.kind_of("ghost") is None

    def test_predecessors_in_edge_order(self, make_graph, make_node):
        """Test that predecessors follow the edge array and skip repeats."""
        graph = make_graph(
            [make_node(node_id, "Object") for node_id in ("a", "b", "c", "t")],
            [("c", "t"), ("a", "t"), ("c", "t"), ("b", "x")],
        )

        assert graph.predecessors("t") == ["c", "a"]

    def test_dangling_edges_are_kept(self, make_graph, make_node):
        """Test that edges naming unknown ids stay in the edge list."""
        graph = make_graph([make_node("a", "Object")], [("a", "ghost")])

        assert graph.edge_count == 1
        assert graph.predecessors("ghost") == ["a"]
        assert not graph.has_node("ghost")

    def test_link_queries(self, make_graph, make_node):
        graph = make_graph(
            [make_node("q", "Data"), make_node("a", "Data"), make_node("s", "Space")],
            [("a", "q"), ("q", "s")],
        )

        assert graph.are_linked("q", "a")
        assert graph.are_linked("a", "q")
        assert not graph.are_linked("a", "s")
        assert graph.has_edge_into("q", {"s"})
        assert not graph.has_edge_into("s", {"q"})
        assert not graph.has_edge_into("ghost", {"q"})

    def test_edges_within(self, make_graph, make_node):
        graph = make_graph(
            [make_node(node_id, "Object") for node_id in ("a", "b", "c")],
            [("a", "b"), ("b", "c"), ("c", "a")],
        )

        scoped = graph.edges_within({"a", "b"})

        assert scoped == [FlowEdge("a", "b")]


class TestSpaceTopology:
    """Tests for space link queries."""

    def test_space_links(self, make_graph, make_node):
        graph = make_graph(
            [make_node("s1", "Space"), make_node("s2", "Space"), make_node("o", "Object")],
            [("o", "s1"), ("s1", "s2")],
        )

        assert graph.space_links() == [FlowEdge("s1", "s2")]
        assert set(graph.space_graph().edges()) == {("s1", "s2")}

    def test_find_space_cycle(self, make_graph, make_node):
        graph = make_graph(
            [make_node("s1", "Space"), make_node("s2", "Space")],
            [("s1", "s2"), ("s2", "s1")],
        )

        cycle = graph.find_space_cycle()

        assert cycle[0] == cycle[-1]
        assert set(cycle) == {"s1", "s2"}

    def test_no_space_cycle(self, make_graph, make_node):
        graph = make_graph(
            [make_node("s1", "Space"), make_node("s2", "Space")],
            [("s1", "s2")],
        )

        assert graph.find_space_cycle() is None


class TestEndingNodes:
    """Tests for ending node detection."""

    def test_spaces_take_priority(self, make_graph, make_node):
        """Test that a terminal Space hides other terminal nodes."""
        graph = make_graph(
            [
                make_node("s1", "Space"),
                make_node("q1", "Data"),
                make_node("a1", "Data"),
                make_node("o1", "Object"),
            ],
            [("a1", "q1"), ("o1", "s1")],
        )

        ending = graph.ending_nodes()

        assert [node.id for node in ending] == ["s1"]

    def test_non_space_endings(self, make_graph, make_node):
        graph = make_graph(
            [make_node("e1", "Entity"), make_node("c1", "Component"), make_node("x", "ChatOpenAI")],
            [("c1", "e1"), ("e1", "x")],
        )

        # x has no outgoing edge but is not a domain node
        assert graph.ending_nodes() == []

    def test_single_node_flow(self, make_graph, make_node):
        graph = make_graph([make_node("s1", "Space")])

        assert [node.id for node in graph.ending_nodes()] == ["s1"]

    def test_category_from_config(self, make_node):
        """Test that the wrapper takes the domain category from the process-wide config."""
        nodes = parse_nodes([
            make_node("custom", "Custom", category="Scenes"),
            make_node("e1", "Entity"),
        ])
        edges = [FlowEdge("e1", "custom")]

        assert get_ending_nodes(nodes, edges) == []

        set_config(CompilerConfig(updl_category="Scenes"))

        assert [node.id for node in get_ending_nodes(nodes, edges)] == ["custom"]

    def test_category_only_node(self, make_node):
        """Test that a node with the UPDL category counts even without a kind."""
        nodes = parse_nodes([
            make_node("custom", "Custom", category="UPDL"),
            make_node("e1", "Entity"),
        ])
        edges = [FlowEdge("e1", "custom")]

        ending = get_ending_nodes(nodes, edges)

        assert [node.id for node in ending] == ["custom"]
        assert isinstance(ending[0], FlowNode)
