"""
UPDL Models

Input graph nodes/edges and the typed records the compiler produces.
"""

from .nodes import FlowNode, FlowEdge, parse_nodes, parse_edges
from .records import (
    UPDLModel,
    Vector3,
    ColorRGB,
    Transform,
    Object3D,
    Camera,
    Light,
    DataMetadata,
    DataNode,
    Action,
    Event,
    Component,
    Entity,
    LeadCollection,
    SpaceSettings,
    Space,
    Scene,
    MultiScene,
    FlowResult,
)

__all__ = [
    'FlowNode',
    'FlowEdge',
    'parse_nodes',
    'parse_edges',
    'UPDLModel',
    'Vector3',
    'ColorRGB',
    'Transform',
    'Object3D',
    'Camera',
    'Light',
    'DataMetadata',
    'DataNode',
    'Action',
    'Event',
    'Component',
    'Entity',
    'LeadCollection',
    'SpaceSettings',
    'Space',
    'Scene',
    'MultiScene',
    'FlowResult',
]
