"""
UPDL Flow Graph

NetworkX-backed index over one flow's nodes and edges. Built fresh for every
compilation and discarded afterwards; nothing here is shared between calls.
"""

from typing import TYPE_CHECKING, Dict, Iterable, List, Optional, Sequence, Set

import networkx as nx

from updl.core.config import get_config
from updl.core.constants import NodeKind, UPDL_CATEGORY
from updl.core.exceptions import NodeNotFoundError
from updl.core.logging_config import get_logger
from .classifier import updl_nodes

if TYPE_CHECKING:
    from updl.models.nodes import FlowEdge, FlowNode

logger = get_logger("graph.flow")


class FlowGraph:
    """
    Directed multigraph of editor nodes.

    Edge order matters to the compiler (attachment follows the editor's edge
    array), so the editor's edge list is kept next to the networkx graph and
    every ordered query walks that list. The networkx graph answers the
    structural questions: degrees, neighbors, cycles.

    Edges may name ids that have no node; they stay in the edge list and the
    graph so that lookups by id behave like the raw JSON does.
    """

    def __init__(self, nodes: Sequence['FlowNode'], edges: Sequence['FlowEdge']):
        self._graph = nx.MultiDiGraph()
        self._nodes: Dict[str, 'FlowNode'] = {}
        self._order: List['FlowNode'] = list(nodes)
        self._edges: List['FlowEdge'] = list(edges)

        for node in self._order:
            # First node wins when the editor emits a duplicate id
            if node.id not in self._nodes:
                self._nodes[node.id] = node
                self._graph.add_node(node.id, kind=node.kind)

        for edge in self._edges:
            self._graph.add_edge(edge.source, edge.target)

        logger.debug(f"Built flow graph: {len(self._nodes)} nodes, {len(self._edges)} edges")

    # =========================================================================
    #  BASIC ACCESS
    # =========================================================================

    @property
    def nodes(self) -> List['FlowNode']:
        """Nodes in editor order."""
        return list(self._order)

    @property
    def edges(self) -> List['FlowEdge']:
        """Edges in editor order."""
        return list(self._edges)

    @property
    def node_count(self) -> int:
        return len(self._nodes)

    @property
    def edge_count(self) -> int:
        return len(self._edges)

    def has_node(self, node_id: str) -> bool:
        return node_id in self._nodes

    def get_node(self, node_id: str) -> 'FlowNode':
        """Get a node by ID."""
        if node_id not in self._nodes:
            raise NodeNotFoundError(node_id)
        return self._nodes[node_id]

    def find_node(self, node_id: str) -> Optional['FlowNode']:
        return self._nodes.get(node_id)

    def kind_of(self, node_id: str) -> Optional[NodeKind]:
        node = self._nodes.get(node_id)
        return node.kind if node else None

    def get_nodes_by_kind(self, kind: NodeKind) -> List['FlowNode']:
        """All nodes of a kind, in editor order."""
        return [node for node in self._order if node.kind is kind]

    # =========================================================================
    #  NEIGHBORHOOD
    # =========================================================================

    def predecessors(self, node_id: str) -> List[str]:
        """Sources of edges into ``node_id``, in edge order, without repeats."""
        seen: Set[str] = set()
        result = []
        for edge in self._edges:
            if edge.target == node_id and edge.source not in seen:
                seen.add(edge.source)
                result.append(edge.source)
        return result

    def has_edge_into(self, source_id: str, targets: Set[str]) -> bool:
        """True if some edge leaves ``source_id`` for one of ``targets``."""
        if source_id not in self._graph:
            return False
        return any(target in targets for target in self._graph.successors(source_id))

    def are_linked(self, a: str, b: str) -> bool:
        """True if an edge joins the two ids in either direction."""
        return self._graph.has_edge(a, b) or self._graph.has_edge(b, a)

    def edges_within(self, node_ids: Set[str]) -> List['FlowEdge']:
        """Edges whose both endpoints are in ``node_ids``, in editor order."""
        return [
            edge for edge in self._edges
            if edge.source in node_ids and edge.target in node_ids
        ]

    # =========================================================================
    #  SPACE TOPOLOGY
    # =========================================================================

    def space_links(self) -> List['FlowEdge']:
        """Edges that join two Space nodes, in editor order."""
        return [
            edge for edge in self._edges
            if self.kind_of(edge.source) is NodeKind.SPACE
            and self.kind_of(edge.target) is NodeKind.SPACE
        ]

    def space_graph(self) -> nx.DiGraph:
        """Space-only view: one node per Space, one edge per space link."""
        spaces = nx.DiGraph()
        for node in self.get_nodes_by_kind(NodeKind.SPACE):
            spaces.add_node(node.id)
        for edge in self.space_links():
            spaces.add_edge(edge.source, edge.target)
        return spaces

    def find_space_cycle(self) -> Optional[List[str]]:
        """Node ids along one cycle among spaces, or None if there is none."""
        try:
            cycle = nx.find_cycle(self.space_graph())
        except nx.NetworkXNoCycle:
            return None
        return [source for source, _target in cycle] + [cycle[-1][1]]

    # =========================================================================
    #  ENDING NODES
    # =========================================================================

    def ending_nodes(self, category: str = UPDL_CATEGORY) -> List['FlowNode']:
        """
        Domain nodes where the flow terminates.

        A node ends the flow when nothing leaves it and something enters it;
        a single-node flow ends at that node. Spaces take priority: when any
        Space is an ending node only the Spaces are returned.
        """
        if self.node_count == 1:
            ending_ids = set(self._nodes)
        else:
            ending_ids = {
                node_id for node_id in self._nodes
                if self._graph.out_degree(node_id) == 0 and self._graph.in_degree(node_id) > 0
            }

        candidates = [node for node in self._nodes.values() if node.id in ending_ids]
        ending = updl_nodes(candidates, category)
        spaces = [node for node in ending if node.kind is NodeKind.SPACE]
        return spaces or ending


def get_ending_nodes(
    nodes: Iterable['FlowNode'],
    edges: Iterable['FlowEdge'],
    category: Optional[str] = None,
) -> List['FlowNode']:
    """
    Convenience wrapper around ``FlowGraph.ending_nodes``.

    ``category`` defaults to ``updl_category`` of the process-wide config.
    """
    if category is None:
        category = get_config().updl_category
    return FlowGraph(list(nodes), list(edges)).ending_nodes(category)
