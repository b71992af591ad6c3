"""
UPDL Node Classifier

Decides which editor nodes belong to the domain graph and what kind they are.
The lower-cased ``data.name`` is the only thing consulted for the kind.
"""

from typing import TYPE_CHECKING, Any, Iterable, List, Optional

from updl.core.constants import KIND_TAGS, NodeKind, UPDL_CATEGORY

if TYPE_CHECKING:
    from updl.models.nodes import FlowNode


def kind_from_name(name: Any) -> Optional[NodeKind]:
    """Map a raw ``data.name`` to its NodeKind, or None for non-domain names."""
    if not isinstance(name, str):
        return None
    tag = name.lower()
    if tag in KIND_TAGS:
        return NodeKind(tag)
    return None


def is_updl_node(node: 'FlowNode', category: str = UPDL_CATEGORY) -> bool:
    """True when the node carries the UPDL category or a known kind tag."""
    return node.category == category or node.kind is not None


def is_kind(node: 'FlowNode', kind: NodeKind) -> bool:
    return node.kind is kind


def filter_kind(nodes: Iterable['FlowNode'], kind: NodeKind) -> List['FlowNode']:
    """Nodes of one kind, in input order."""
    return [node for node in nodes if node.kind is kind]


def updl_nodes(nodes: Iterable['FlowNode'], category: str = UPDL_CATEGORY) -> List['FlowNode']:
    return [node for node in nodes if is_updl_node(node, category)]
