"""
UPDL Core Module

Configuration, constants, exceptions, logging and tracing.
"""

from .config import CompilerConfig, CyclePolicy, load_config, save_config, get_default_config
from .constants import NodeKind, KIND_TAGS
from .exceptions import *
from .logging_config import setup_logging, get_logger, LogLevel
from .tracing import CompilerTracer, NullTracer, RecordingTracer, TraceEvent

__all__ = [
    'CompilerConfig',
    'CyclePolicy',
    'load_config',
    'save_config',
    'get_default_config',
    'NodeKind',
    'KIND_TAGS',
    'setup_logging',
    'get_logger',
    'LogLevel',
    # Tracing
    'CompilerTracer',
    'NullTracer',
    'RecordingTracer',
    'TraceEvent',
    # Exceptions
    'UPDLError',
    'ConfigurationError',
    'InvalidConfigError',
    'FlowError',
    'FlowParseError',
    'GraphError',
    'NodeNotFoundError',
    'SpaceChainCycleError',
]
