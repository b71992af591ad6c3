"""
UPDL Custom Exceptions

Exception classes for error handling throughout the flow compiler.
"""


class UPDLError(Exception):
    """Base exception for all UPDL compiler errors."""

    def __init__(self, message: str, details: dict = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self):
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


# =============================================================================
# CONFIGURATION ERRORS
# =============================================================================

class ConfigurationError(UPDLError):
    """Raised when there's an issue with configuration."""
    pass


class InvalidConfigError(ConfigurationError):
    """Raised when a configuration value is invalid."""
    pass


# =============================================================================
# FLOW ERRORS
# =============================================================================

class FlowError(UPDLError):
    """Base exception for flow compilation errors."""
    pass


class FlowParseError(FlowError, ValueError):
    """Raised when the flow JSON cannot be parsed into nodes and edges."""

    def __init__(self, reason: str, position: int = None):
        message = f"Invalid flow data: {reason}"
        details = {"reason": reason}
        if position is not None:
            details["position"] = position
        super().__init__(message, details)


# =============================================================================
# GRAPH ERRORS
# =============================================================================

class GraphError(FlowError):
    """Base exception for flow graph errors."""
    pass


class NodeNotFoundError(GraphError):
    """Raised when a node is not found in the graph."""

    def __init__(self, node_id: str):
        message = f"Node not found in graph: '{node_id}'"
        super().__init__(message, {"node_id": node_id})


class SpaceChainCycleError(GraphError):
    """Raised when the space chain loops back onto an already visited space."""

    def __init__(self, cycle_path: list):
        message = f"Cyclic space chain detected: {' -> '.join(cycle_path)}"
        super().__init__(message, {"cycle_path": cycle_path})
