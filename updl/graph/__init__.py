"""
UPDL Graph Module

Node classification, the per-call flow graph index, and per-space
extraction of scene and data nodes.
"""

from .classifier import is_updl_node, kind_from_name, filter_kind, updl_nodes
from .flow_graph import FlowGraph, get_ending_nodes
from .extraction import get_connected_nodes, get_connected_data_nodes

__all__ = [
    'is_updl_node',
    'kind_from_name',
    'filter_kind',
    'updl_nodes',
    'FlowGraph',
    'get_ending_nodes',
    'get_connected_nodes',
    'get_connected_data_nodes',
]
