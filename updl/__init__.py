"""
UPDL Flow Compiler

Compiles the node/edge graph drawn in the visual flow editor into typed
Space and MultiScene descriptions for the 3D/AR scene generators.

Version: 0.3.0
"""

__version__ = "0.3.0"
__project__ = "UPDL Flow Compiler"

from .core.config import CompilerConfig, CyclePolicy
from .core.exceptions import UPDLError, FlowParseError, SpaceChainCycleError
from .core.tracing import CompilerTracer, TraceEvent
from .compiler.processor import process_flow_data
from .graph.flow_graph import get_ending_nodes
from .models.records import FlowResult, MultiScene, Scene, Space

__all__ = [
    "__version__",
    "__project__",
    "process_flow_data",
    "get_ending_nodes",
    "CompilerConfig",
    "CyclePolicy",
    "CompilerTracer",
    "TraceEvent",
    "FlowResult",
    "MultiScene",
    "Scene",
    "Space",
    "UPDLError",
    "FlowParseError",
    "SpaceChainCycleError",
]
