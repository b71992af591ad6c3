"""
UPDL Scene Extraction

Per-space node gathering. Two independent lookups run for every space:
the scene subgraph (entities and everything hanging off them, plus objects,
cameras and lights) and the data nodes (quiz content and its answers).
"""

from typing import TYPE_CHECKING, List, Set

from updl.core.constants import NodeKind, SCENE_EXCLUDED_KINDS
from updl.core.logging_config import get_logger
from .flow_graph import FlowGraph

if TYPE_CHECKING:
    from updl.models.nodes import FlowNode

logger = get_logger("graph.extraction")

# Kinds pulled in because they point at something already in the scene
_BEHAVIOR_KINDS = (NodeKind.COMPONENT, NodeKind.EVENT)


def get_connected_nodes(space_id: str, graph: FlowGraph) -> List['FlowNode']:
    """
    Collect the non-Space, non-Data nodes that make up one scene.

    Seeds are the direct predecessors of the space; traversal never passes
    through another Space. Two fixed expansion passes follow the
    Entity <- Component/Event <- Action hierarchy, nothing deeper.

    Args:
        space_id: ID of the Space node
        graph: Flow graph of the whole editor canvas

    Returns:
        Scene nodes in editor order
    """
    # Linked Spaces are not seeds
    scene_ids: Set[str] = {
        node_id for node_id in graph.predecessors(space_id)
        if graph.kind_of(node_id) is not NodeKind.SPACE
    }

    # Components and events attached to anything already in the scene.
    # The set grows during the pass, so a component pointing at an event
    # that was added earlier in the same pass is picked up too.
    for node in graph.nodes:
        if node.kind in _BEHAVIOR_KINDS and graph.has_edge_into(node.id, scene_ids):
            scene_ids.add(node.id)

    event_ids = {
        node.id for node in graph.nodes
        if node.kind is NodeKind.EVENT and node.id in scene_ids
    }
    for node in graph.nodes:
        if node.kind is NodeKind.ACTION and graph.has_edge_into(node.id, event_ids):
            scene_ids.add(node.id)

    result = [
        node for node in graph.nodes
        if node.id in scene_ids and node.kind not in SCENE_EXCLUDED_KINDS
    ]
    logger.debug(f"Space {space_id}: {len(result)} scene nodes")
    return result


def get_connected_data_nodes(space_id: str, graph: FlowGraph) -> List['FlowNode']:
    """
    Collect the Data nodes of one space.

    Direct data nodes point at the space. Each of them then pulls in any
    other Data node linked to it in either direction (question <-> answer),
    one hop only.
    """
    data_nodes = graph.get_nodes_by_kind(NodeKind.DATA)
    space_preds = set(graph.predecessors(space_id))

    direct = [node for node in data_nodes if node.id in space_preds]
    included: Set[str] = {node.id for node in direct}
    result = list(direct)

    for data_node in direct:
        related = [
            node for node in data_nodes
            if node.id not in included and graph.are_linked(data_node.id, node.id)
        ]
        for node in related:
            included.add(node.id)
            result.append(node)

    summary = ", ".join(f"{node.id}:{node.inputs.get('dataType')}" for node in result)
    logger.debug(f"Space {space_id}: found {len(result)} connected data nodes ({summary})")
    return result
