"""
UPDL Constants

Kind tags, default values and other constants shared by the compiler.
"""

from enum import Enum
from typing import Dict, Tuple

# =============================================================================
# VERSION INFO
# =============================================================================
VERSION = "0.3.0"
PROJECT_NAME = "UPDL Flow Compiler"

# =============================================================================
# NODE CLASSIFICATION
# =============================================================================

# Nodes whose data.category carries this marker belong to the domain graph
UPDL_CATEGORY = "UPDL"


class NodeKind(Enum):
    """Closed set of kind tags, matched against the lower-cased data.name."""
    SPACE = "space"
    OBJECT = "object"
    CAMERA = "camera"
    LIGHT = "light"
    DATA = "data"
    ENTITY = "entity"
    COMPONENT = "component"
    EVENT = "event"
    ACTION = "action"
    UNIVERSO = "universo"


KIND_TAGS = frozenset(kind.value for kind in NodeKind)

# Kinds gathered separately from the per-scene subgraph
SCENE_EXCLUDED_KINDS = frozenset({NodeKind.SPACE, NodeKind.DATA})

# =============================================================================
# SCENE ASSEMBLY
# =============================================================================

DEFAULT_SPACE_ID = "default-space"
RESULTS_SCENE_SUFFIX = "-results"
RESULTS_SPACE_TYPE = "results"

# =============================================================================
# CONVERTER DEFAULTS
# =============================================================================

ZERO_VECTOR: Tuple[float, float, float] = (0, 0, 0)
UNIT_VECTOR: Tuple[float, float, float] = (1, 1, 1)
CAMERA_POSITION: Tuple[float, float, float] = (0, 0, 5)
LIGHT_POSITION: Tuple[float, float, float] = (0, 10, 0)

DEFAULT_OBJECT_PRIMITIVE = "box"
DEFAULT_OBJECT_COLOR = "#ffffff"
DEFAULT_BACKGROUND = "#000000"

CAMERA_FOV = 75
CAMERA_NEAR = 0.1
CAMERA_FAR = 1000

DEFAULT_LIGHT_TYPE = "directional"
DEFAULT_DATA_TYPE = "Question"
DEFAULT_EVENT_TYPE = "click"

# Values accepted as "true" for flags edited through text inputs
TRUTHY_FLAG_VALUES = (True, "true", 1, "1")

# Component-type specific fields: type -> {wire field name: default}
COMPONENT_EXTRA_DEFAULTS: Dict[str, Dict[str, object]] = {
    "inventory": {"maxCapacity": 20, "currentLoad": 0},
    "weapon": {"fireRate": 2, "damage": 1},
    "trading": {"pricePerTon": 10, "interactionRange": 15},
    "mineable": {"resourceType": "asteroidMass", "maxYield": 3},
    "portal": {"targetWorld": "konkordo", "cooldownTime": 2000},
}
