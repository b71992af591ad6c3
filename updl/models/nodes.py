"""
Flow Graph Input Models

Tagged representation of the editor's node/edge JSON. Parsing is tolerant:
entries that cannot be a node or an edge are dropped, never raised on.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from updl.core.constants import NodeKind
from updl.core.logging_config import get_logger
from updl.graph.classifier import kind_from_name

logger = get_logger("models.nodes")


@dataclass(frozen=True)
class FlowNode:
    """An editor node tagged with its kind."""
    id: str
    kind: Optional[NodeKind] = None
    category: Optional[str] = None
    name: Optional[str] = None
    label: Optional[str] = None
    inputs: Dict[str, Any] = field(default_factory=dict)
    data: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> Optional['FlowNode']:
        """Build a FlowNode from raw JSON, or None if there is no usable id."""
        node_id = _coerce_id(raw.get('id'))
        if node_id is None:
            return None

        data = raw.get('data')
        if not isinstance(data, dict):
            data = {}

        inputs = data.get('inputs')
        if not isinstance(inputs, dict):
            inputs = {}

        name = data.get('name')
        category = data.get('category')
        label = data.get('label')

        return cls(
            id=node_id,
            kind=kind_from_name(name),
            category=category if isinstance(category, str) else None,
            name=name if isinstance(name, str) else None,
            label=label if isinstance(label, str) else None,
            inputs=inputs,
            data=data,
        )


@dataclass(frozen=True)
class FlowEdge:
    """A directed edge between two node ids."""
    source: str
    target: str

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> Optional['FlowEdge']:
        source = _coerce_id(raw.get('source'))
        target = _coerce_id(raw.get('target'))
        if source is None or target is None:
            return None
        return cls(source=source, target=target)


def _coerce_id(value: Any) -> Optional[str]:
    # bool is an int subclass and never a meaningful id
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, int):
        return str(value)
    return None


def parse_nodes(raw_nodes: Any) -> List[FlowNode]:
    """Parse the ``nodes`` array, keeping input order."""
    if not isinstance(raw_nodes, list):
        return []

    nodes = []
    for index, raw in enumerate(raw_nodes):
        node = FlowNode.from_dict(raw) if isinstance(raw, dict) else None
        if node is None:
            logger.debug(f"Skipping node #{index}: no usable id")
            continue
        nodes.append(node)
    return nodes


def parse_edges(raw_edges: Any) -> List[FlowEdge]:
    """Parse the ``edges`` array, keeping input order."""
    if not isinstance(raw_edges, list):
        return []

    edges = []
    for index, raw in enumerate(raw_edges):
        edge = FlowEdge.from_dict(raw) if isinstance(raw, dict) else None
        if edge is None:
            logger.debug(f"Skipping edge #{index}: missing source or target")
            continue
        edges.append(edge)
    return edges
