"""
UPDL Domain Records

Typed records produced by the compiler. Attributes are snake_case in Python;
``to_dict()`` emits the camelCase shape that scene generators consume.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import Any, Dict, List, Optional


class UPDLModel(BaseModel):
    """Base for every record: camelCase aliases, populate by field name."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_dict(self) -> Dict[str, Any]:
        """Wire form: camelCase keys, absent optionals omitted."""
        return self.model_dump(by_alias=True, exclude_none=True)


# =============================================================================
# GEOMETRY
# =============================================================================

class Vector3(UPDLModel):
    x: float = 0
    y: float = 0
    z: float = 0


class ColorRGB(UPDLModel):
    r: float = 1
    g: float = 1
    b: float = 1


def _zero() -> Vector3:
    return Vector3()


def _unit() -> Vector3:
    return Vector3(x=1, y=1, z=1)


class Transform(UPDLModel):
    position: Vector3 = Field(default_factory=_zero)
    rotation: Vector3 = Field(default_factory=_zero)
    scale: Vector3 = Field(default_factory=_unit)


# =============================================================================
# SCENE CONTENT
# =============================================================================

class Object3D(UPDLModel):
    id: str
    name: str
    type: str = "box"
    position: Vector3 = Field(default_factory=_zero)
    rotation: Vector3 = Field(default_factory=_zero)
    scale: Vector3 = Field(default_factory=_unit)
    color: str = "#ffffff"
    primitive: Optional[str] = None
    visible: bool = True


class Camera(UPDLModel):
    id: str
    name: str
    type: str = "camera"
    position: Vector3 = Field(default_factory=lambda: Vector3(z=5))
    rotation: Vector3 = Field(default_factory=_zero)
    scale: Vector3 = Field(default_factory=_unit)
    fov: float = 75
    near: float = 0.1
    far: float = 1000


class Light(UPDLModel):
    id: str
    name: str
    type: str = "directional"
    position: Vector3 = Field(default_factory=lambda: Vector3(y=10))
    rotation: Vector3 = Field(default_factory=_zero)
    scale: Vector3 = Field(default_factory=_unit)
    color: Optional[ColorRGB] = None
    intensity: float = 1
    distance: Optional[float] = None
    decay: Optional[float] = None


class DataMetadata(UPDLModel):
    difficulty: Any = 1
    tags: List[str] = Field(default_factory=list)


class DataNode(UPDLModel):
    """Quiz-style content: a question, an answer, an intro text..."""
    id: str
    name: str
    data_type: str = "Question"
    content: Any = ""
    is_correct: bool = False
    next_space: Optional[str] = None
    objects: List[Any] = Field(default_factory=list)
    enable_points: bool = False
    points_value: float = 0
    metadata: DataMetadata = Field(default_factory=DataMetadata)


# =============================================================================
# ENTITY GRAPH
# =============================================================================

class Action(UPDLModel):
    id: str
    action_type: str = "default"
    target: Optional[Any] = None
    params: Dict[str, Any] = Field(default_factory=dict)


class Event(UPDLModel):
    id: str
    event_type: str = "click"
    source: Optional[Any] = None
    actions: List[Action] = Field(default_factory=list)


class Component(UPDLModel):
    """Behavior block. Type-specific fields are set only for their type."""
    id: str
    component_type: str = "default"
    primitive: Optional[str] = None
    color: Optional[Any] = None
    script_name: Optional[str] = None
    props: Dict[str, Any] = Field(default_factory=dict)

    # inventory
    max_capacity: Optional[float] = None
    current_load: Optional[float] = None
    # weapon
    fire_rate: Optional[float] = None
    damage: Optional[float] = None
    # trading
    price_per_ton: Optional[float] = None
    interaction_range: Optional[float] = None
    # mineable
    resource_type: Optional[str] = None
    max_yield: Optional[float] = None
    # portal
    target_world: Optional[str] = None
    cooldown_time: Optional[float] = None


class Entity(UPDLModel):
    id: str
    name: str
    entity_type: str = "default"
    transform: Transform = Field(default_factory=Transform)
    tags: List[str] = Field(default_factory=list)
    components: List[Component] = Field(default_factory=list)
    events: List[Event] = Field(default_factory=list)


# =============================================================================
# SPACES AND SCENES
# =============================================================================

class LeadCollection(UPDLModel):
    collect_name: bool = False
    collect_email: bool = False
    collect_phone: bool = False


class SpaceSettings(UPDLModel):
    background: Any = "#000000"
    fog: Optional[Any] = None
    physics: Optional[Any] = None


class Space(UPDLModel):
    id: str
    name: str
    space_type: str = "default"
    is_root_node: bool = False
    description: str = ""
    objects: List[Object3D] = Field(default_factory=list)
    cameras: List[Camera] = Field(default_factory=list)
    lights: List[Light] = Field(default_factory=list)
    datas: List[DataNode] = Field(default_factory=list)
    entities: List[Entity] = Field(default_factory=list)
    components: List[Component] = Field(default_factory=list)
    events: List[Event] = Field(default_factory=list)
    actions: List[Action] = Field(default_factory=list)
    universo: List[Dict[str, Any]] = Field(default_factory=list)
    show_points: bool = False
    lead_collection: LeadCollection = Field(default_factory=LeadCollection)
    settings: SpaceSettings = Field(default_factory=SpaceSettings)

    def emptied(self) -> 'Space':
        """Copy with identity and settings kept but every collection empty."""
        return self.model_copy(
            update={
                'objects': [], 'cameras': [], 'lights': [], 'datas': [],
                'entities': [], 'components': [], 'events': [], 'actions': [],
                'universo': [],
            },
            deep=True,
        )


class Scene(UPDLModel):
    space_id: str
    space_data: Space
    data_nodes: List[DataNode] = Field(default_factory=list)
    object_nodes: List[Object3D] = Field(default_factory=list)
    next_scene_id: Optional[str] = None
    is_last: bool = False
    order: int = 0
    is_results_scene: bool = False


class MultiScene(UPDLModel):
    scenes: List[Scene] = Field(default_factory=list)
    current_scene_index: int = 0
    total_scenes: int = 0
    is_completed: bool = False


class FlowResult(UPDLModel):
    """Compiler output: exactly one of the two fields is set."""
    updl_space: Optional[Space] = None
    multi_scene: Optional[MultiScene] = None

    @property
    def is_multi_scene(self) -> bool:
        return self.multi_scene is not None
