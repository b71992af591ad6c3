"""
UPDL Flow Processor

Entry point of the compiler: editor JSON in, FlowResult out.
"""

import json
from typing import Any, Dict, Optional

from updl.core.config import CompilerConfig, get_config
from updl.core.exceptions import FlowParseError
from updl.core.logging_config import get_logger
from updl.core.tracing import CompilerTracer, NullTracer
from updl.graph.flow_graph import FlowGraph
from updl.models.nodes import parse_edges, parse_nodes
from updl.models.records import FlowResult
from .assembler import build_space_from_nodes
from .space_chain import analyze_space_chain

logger = get_logger("compiler.processor")


def parse_flow_data(flow_data: str) -> Dict[str, Any]:
    """
    Decode the editor JSON.

    Raises:
        FlowParseError: The string is not JSON or not a JSON object
    """
    try:
        parsed = json.loads(flow_data)
    except (TypeError, json.JSONDecodeError) as e:
        position = getattr(e, 'pos', None)
        raise FlowParseError(str(e), position) from e

    if not isinstance(parsed, dict):
        raise FlowParseError(f"expected a JSON object, got {type(parsed).__name__}")

    return parsed


def build_flow_graph(parsed: Dict[str, Any]) -> FlowGraph:
    """Tagged graph from decoded JSON; missing arrays count as empty."""
    return FlowGraph(parse_nodes(parsed.get('nodes')), parse_edges(parsed.get('edges')))


def process_flow_data(
    flow_data: str,
    config: Optional[CompilerConfig] = None,
    tracer: Optional[CompilerTracer] = None,
) -> FlowResult:
    """
    Compile an editor flow.

    Chained multi-space flows compile to a MultiScene; everything else
    compiles to a single Space over the whole canvas.

    Args:
        flow_data: JSON string with ``nodes`` and ``edges`` arrays
        config: Compiler configuration (defaults to the process-wide one)
        tracer: Receives diagnostic TraceEvents

    Returns:
        FlowResult with either ``multi_scene`` or ``updl_space`` set

    Raises:
        FlowParseError: ``flow_data`` is not a JSON object
        SpaceChainCycleError: Only with ``cycle_policy=error`` and a looping chain
    """
    config = config or get_config()
    tracer = tracer or NullTracer()

    try:
        parsed = parse_flow_data(flow_data)
    except FlowParseError as e:
        logger.error(f"Error processing flow data: {e}")
        raise

    graph = build_flow_graph(parsed)
    tracer.emit("flow.parsed", nodes=graph.node_count, edges=graph.edge_count)

    multi_scene = analyze_space_chain(graph, config, tracer)
    if multi_scene is not None:
        return FlowResult(multi_scene=multi_scene)

    return FlowResult(updl_space=build_space_from_nodes(graph, tracer))
