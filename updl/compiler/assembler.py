"""
UPDL Scene Assembler

Packages converted nodes into Space, Scene and MultiScene records, and
appends the synthetic results scene that closes every multi-scene flow.
"""

from typing import List, Optional, Sequence

from updl.core.config import CompilerConfig
from updl.core.constants import NodeKind
from updl.core.logging_config import get_logger
from updl.core.tracing import CompilerTracer, NullTracer
from updl.graph.extraction import get_connected_data_nodes, get_connected_nodes
from updl.graph.flow_graph import FlowGraph
from updl.models.nodes import FlowEdge, FlowNode
from updl.models.records import MultiScene, Scene, Space
from .attacher import attach_relationships
from .converters import convert_all, convert_space

logger = get_logger("compiler.assembler")


def assemble_space(
    space_node: Optional[FlowNode],
    content_nodes: Sequence[FlowNode],
    data_nodes: Sequence[FlowNode],
    edges: Sequence[FlowEdge],
    tracer: Optional[CompilerTracer] = None,
    scope: Optional[str] = None,
) -> Space:
    """
    Convert one scope's nodes and attach its behavior graph.

    Args:
        space_node: The Space the records belong to (None for a space-less flow)
        content_nodes: Objects, cameras, lights, entities, components, events,
            actions and universo nodes of the scope
        data_nodes: Data nodes of the scope
        edges: Edges used for attachment; callers pass them already scoped
        tracer: Trace sink
        scope: Space id for diagnostics
    """
    tracer = tracer or NullTracer()

    entities = convert_all(content_nodes, NodeKind.ENTITY)
    components = convert_all(content_nodes, NodeKind.COMPONENT)
    events = convert_all(content_nodes, NodeKind.EVENT)
    actions = convert_all(content_nodes, NodeKind.ACTION)

    attach_relationships(entities, components, events, actions, edges, tracer=tracer, scope=scope)

    space = convert_space(
        space_node,
        objects=convert_all(content_nodes, NodeKind.OBJECT),
        cameras=convert_all(content_nodes, NodeKind.CAMERA),
        lights=convert_all(content_nodes, NodeKind.LIGHT),
        datas=convert_all(data_nodes, NodeKind.DATA),
        entities=entities,
        components=components,
        events=events,
        actions=actions,
        universo=convert_all(content_nodes, NodeKind.UNIVERSO),
    )

    tracer.emit(
        "space.built",
        space=space.id,
        entities=len(space.entities),
        objects=len(space.objects),
        datas=len(space.datas),
    )
    return space


def build_space_from_nodes(
    graph: FlowGraph,
    tracer: Optional[CompilerTracer] = None,
) -> Space:
    """
    Single-space compilation over the whole canvas.

    With at most one Space there is nothing to scope, so every node and
    every edge takes part. Nodes without a kind land in no collection.
    """
    spaces = graph.get_nodes_by_kind(NodeKind.SPACE)
    space_node = spaces[0] if spaces else None

    space = assemble_space(
        space_node,
        content_nodes=graph.nodes,
        data_nodes=graph.nodes,
        edges=graph.edges,
        tracer=tracer,
    )

    logger.info(
        f"Single space built: {len(space.entities)} entities, {len(space.objects)} objects"
    )
    return space


def is_results_space(space: Space, config: CompilerConfig) -> bool:
    return space.space_type.lower() == config.results_space_type.lower()


def build_scene(
    space_node: FlowNode,
    graph: FlowGraph,
    order: int,
    next_space_id: Optional[str] = None,
    tracer: Optional[CompilerTracer] = None,
) -> Scene:
    """
    Compile one Space of a chain into a Scene.

    Only edges with both ends inside the scene are used for attachment, so
    a component never lands on an entity that belongs to another scene.
    """
    tracer = tracer or NullTracer()

    scene_nodes = get_connected_nodes(space_node.id, graph)
    data_nodes = get_connected_data_nodes(space_node.id, graph)
    scene_edges = graph.edges_within({node.id for node in scene_nodes})

    space = assemble_space(
        space_node,
        content_nodes=scene_nodes,
        data_nodes=data_nodes,
        edges=scene_edges,
        tracer=tracer,
        scope=space_node.id,
    )

    scene = Scene(
        space_id=space_node.id,
        space_data=space,
        data_nodes=list(space.datas),
        object_nodes=list(space.objects),
        next_scene_id=next_space_id,
        is_last=next_space_id is None,
        order=order,
        is_results_scene=False,
    )
    tracer.emit("scene.built", space=space_node.id, order=order, next=next_space_id)
    return scene


def make_results_scene(last_scene: Scene, config: Optional[CompilerConfig] = None) -> Scene:
    """Empty terminal scene following ``last_scene``."""
    config = config or CompilerConfig()
    return Scene(
        space_id=f"{last_scene.space_id}{config.results_suffix}",
        space_data=last_scene.space_data.emptied(),
        data_nodes=[],
        object_nodes=[],
        next_scene_id=None,
        is_last=True,
        order=last_scene.order + 1,
        is_results_scene=True,
    )


def build_multi_scene(
    scenes: List[Scene],
    config: Optional[CompilerConfig] = None,
    tracer: Optional[CompilerTracer] = None,
) -> MultiScene:
    """
    Close the chain with a results scene and wrap it.

    If the final natural scene is a results space it is flagged as the
    results scene; otherwise an empty one is appended after it.
    """
    config = config or CompilerConfig()
    tracer = tracer or NullTracer()
    scenes = list(scenes)

    if scenes:
        last = scenes[-1]
        if is_results_space(last.space_data, config):
            last.is_results_scene = True
        if not last.is_results_scene:
            last.is_last = False
            results = make_results_scene(last, config)
            scenes.append(results)
            tracer.emit("scene.results_appended", space=results.space_id, order=results.order)

    return MultiScene(
        scenes=scenes,
        current_scene_index=0,
        total_scenes=len(scenes),
        is_completed=False,
    )
