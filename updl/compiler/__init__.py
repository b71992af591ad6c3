"""
UPDL Compiler Module

Converters, attachment, scene assembly, the space chain analyzer and the
``process_flow_data`` entry point.
"""

from .converters import CONVERTERS, convert_node, convert_all, parse_transform, parse_tags
from .attacher import AttachmentReport, attach_relationships
from .assembler import (
    assemble_space,
    build_space_from_nodes,
    build_scene,
    build_multi_scene,
    make_results_scene,
)
from .space_chain import analyze_space_chain, build_space_links, find_root_spaces, walk_space_chain
from .processor import process_flow_data, parse_flow_data

__all__ = [
    'CONVERTERS',
    'convert_node',
    'convert_all',
    'parse_transform',
    'parse_tags',
    'AttachmentReport',
    'attach_relationships',
    'assemble_space',
    'build_space_from_nodes',
    'build_scene',
    'build_multi_scene',
    'make_results_scene',
    'analyze_space_chain',
    'build_space_links',
    'find_root_spaces',
    'walk_space_chain',
    'process_flow_data',
    'parse_flow_data',
]
