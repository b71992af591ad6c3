"""
UPDL Space Chain Analyzer

Detects multi-space flows and walks the Space -> Space chain from its root,
compiling one Scene per visited space.
"""

from typing import Dict, List, Optional, Set

from updl.core.config import CompilerConfig, CyclePolicy
from updl.core.constants import NodeKind
from updl.core.exceptions import SpaceChainCycleError
from updl.core.logging_config import get_logger
from updl.core.tracing import CompilerTracer, NullTracer
from updl.graph.flow_graph import FlowGraph
from updl.models.records import MultiScene, Scene
from .assembler import build_multi_scene, build_scene

logger = get_logger("compiler.space_chain")


def build_space_links(graph: FlowGraph) -> Dict[str, str]:
    """
    Successor lookup for Space -> Space edges.

    A space has at most one successor; when the editor holds several links
    out of the same space the last one in edge order wins.
    """
    links: Dict[str, str] = {}
    for edge in graph.space_links():
        links[edge.source] = edge.target
    return links


def find_root_spaces(graph: FlowGraph) -> List[str]:
    """Spaces with no incoming Space -> Space link, in editor order."""
    linked_to: Set[str] = {edge.target for edge in graph.space_links()}
    return [
        node.id for node in graph.get_nodes_by_kind(NodeKind.SPACE)
        if node.id not in linked_to
    ]


def walk_space_chain(
    root_id: str,
    links: Dict[str, str],
    config: Optional[CompilerConfig] = None,
    tracer: Optional[CompilerTracer] = None,
) -> List[str]:
    """
    Space ids from ``root_id`` following ``links`` until the chain ends.

    A link back to an already visited space is a cycle: depending on
    ``config.cycle_policy`` the walk stops before the repeat or raises
    SpaceChainCycleError.
    """
    config = config or CompilerConfig()
    tracer = tracer or NullTracer()

    chain: List[str] = []
    visited: Set[str] = set()
    current: Optional[str] = root_id

    while current is not None:
        if current in visited:
            cycle_path = chain[chain.index(current):] + [current]
            tracer.emit("chain.cycle", path=cycle_path, policy=config.cycle_policy.value)
            if config.cycle_policy is CyclePolicy.ERROR:
                raise SpaceChainCycleError(cycle_path)
            logger.warning(
                f"Space chain loops back to {current}; truncating after {chain[-1]}"
            )
            break

        visited.add(current)
        chain.append(current)
        current = links.get(current)

    return chain


def analyze_space_chain(
    graph: FlowGraph,
    config: Optional[CompilerConfig] = None,
    tracer: Optional[CompilerTracer] = None,
) -> Optional[MultiScene]:
    """
    Compile a chained multi-space flow.

    Returns None whenever the flow should go down the single-space path:
    at most one Space, no root space (every space is linked into), or a
    chain that only reaches one scene.

    Args:
        graph: Flow graph of the whole canvas
        config: Compiler configuration
        tracer: Trace sink

    Returns:
        MultiScene with a terminal results scene, or None
    """
    config = config or CompilerConfig()
    tracer = tracer or NullTracer()

    spaces = graph.get_nodes_by_kind(NodeKind.SPACE)
    if len(spaces) <= 1:
        logger.debug("Single space detected, using legacy processing")
        tracer.emit("chain.single_space", spaces=len(spaces))
        return None

    links = build_space_links(graph)
    for source, target in links.items():
        tracer.emit("chain.link", source=source, target=target)

    roots = find_root_spaces(graph)
    if not roots:
        cycle = graph.find_space_cycle()
        logger.info(f"No root space found, using legacy processing (cycle: {cycle})")
        tracer.emit("chain.no_root", spaces=len(spaces), cycle=cycle)
        return None

    if len(roots) > 1:
        logger.debug(f"{len(roots)} root spaces found, starting from {roots[0]}")

    chain = walk_space_chain(roots[0], links, config, tracer)

    scenes: List[Scene] = []
    for order, space_id in enumerate(chain):
        space_node = graph.get_node(space_id)
        next_space_id = chain[order + 1] if order + 1 < len(chain) else None
        scenes.append(build_scene(space_node, graph, order, next_space_id, tracer))

    if len(scenes) <= 1:
        return None

    multi_scene = build_multi_scene(scenes, config, tracer)
    logger.info(f"Multi-scene detected: {multi_scene.total_scenes} scenes")
    return multi_scene
