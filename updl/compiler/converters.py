"""
UPDL Node Converters

Pure functions turning a tagged FlowNode into its domain record. Every
converter is total: missing or wrong-shaped inputs fall back to defaults
and nothing here raises.
"""

import json
import math
from typing import Any, Callable, Dict, List, Optional, Sequence

from pydantic.alias_generators import to_snake

from updl.core.constants import (
    CAMERA_FAR,
    CAMERA_FOV,
    CAMERA_NEAR,
    CAMERA_POSITION,
    COMPONENT_EXTRA_DEFAULTS,
    DEFAULT_BACKGROUND,
    DEFAULT_DATA_TYPE,
    DEFAULT_EVENT_TYPE,
    DEFAULT_LIGHT_TYPE,
    DEFAULT_OBJECT_COLOR,
    DEFAULT_OBJECT_PRIMITIVE,
    DEFAULT_SPACE_ID,
    LIGHT_POSITION,
    TRUTHY_FLAG_VALUES,
    UNIT_VECTOR,
    ZERO_VECTOR,
    NodeKind,
)
from updl.models.nodes import FlowNode
from updl.models.records import (
    Action,
    Camera,
    ColorRGB,
    Component,
    DataMetadata,
    DataNode,
    Entity,
    Event,
    LeadCollection,
    Light,
    Object3D,
    Space,
    SpaceSettings,
    Transform,
    Vector3,
)


# =============================================================================
# VALUE COERCION
# =============================================================================

def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _number_text(value: Any) -> Optional[str]:
    try:
        return str(value)
    except ValueError:
        # int beyond the interpreter's digit limit for str()
        return None


def to_number(value: Any) -> Optional[float]:
    """Finite numeric value of ``value`` or None; numeric strings are parsed."""
    if _is_number(value):
        try:
            as_float = float(value)
        except OverflowError:
            return None
        return value if math.isfinite(as_float) else None
    if isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
        if not math.isfinite(number):
            return None
        return int(number) if number.is_integer() else number
    return None


def number_or(value: Any, default: float) -> float:
    """``value`` as a number, or ``default`` when it is missing, zero or not numeric."""
    number = to_number(value)
    return number if number else default


def text_or(value: Any, default: str) -> str:
    """Non-empty string form of ``value``, or ``default``."""
    if isinstance(value, str):
        return value or default
    if _is_number(value) and value:
        return _number_text(value) or default
    return default


def optional_text(value: Any) -> Optional[str]:
    if isinstance(value, str):
        return value
    if _is_number(value):
        return _number_text(value)
    return None


def is_flag_set(value: Any) -> bool:
    """Checkbox-style flag: ``True``, ``1`` and their string forms count as set."""
    return any(value == truthy and type(value) is type(truthy) for truthy in TRUTHY_FLAG_VALUES)


def node_name(node: FlowNode, fallback: str) -> str:
    """Display name: ``inputs.name``, then the editor label, then ``fallback``."""
    return text_or(node.inputs.get('name'), text_or(node.label, fallback))


def parse_vector(value: Any, default: Sequence[float] = ZERO_VECTOR) -> Vector3:
    """
    Accept ``{x, y, z}`` or ``[x, y, z]``.

    Object-form axes keep any numeric value (zero included); array-form axes
    fall back to the default on zero or junk, matching how the editor writes
    them. Anything else yields the default vector.
    """
    dx, dy, dz = default
    if isinstance(value, dict):
        axes = []
        for axis, fallback in (('x', dx), ('y', dy), ('z', dz)):
            number = to_number(value.get(axis))
            axes.append(fallback if number is None else number)
        return Vector3(x=axes[0], y=axes[1], z=axes[2])
    if isinstance(value, (list, tuple)):
        padded = list(value[:3]) + [None] * (3 - min(len(value), 3))
        return Vector3(
            x=number_or(padded[0], dx),
            y=number_or(padded[1], dy),
            z=number_or(padded[2], dz),
        )
    return Vector3(x=dx, y=dy, z=dz)


def parse_json_object(value: Any) -> Optional[Dict[str, Any]]:
    """A mapping as-is, a JSON string holding an object parsed, else None."""
    if isinstance(value, dict):
        return value
    if isinstance(value, str):
        try:
            parsed = json.loads(value)
        except ValueError:
            return None
        return parsed if isinstance(parsed, dict) else None
    return None


def parse_transform(value: Any) -> Transform:
    """
    Entity transform from an object or JSON string.

    Recognized keys are ``pos``/``position``, ``rot``/``rotation`` and
    ``scale``; unparsable input gives the identity transform.
    """
    transform = Transform()
    parsed = parse_json_object(value) if value else None
    if not parsed:
        return transform

    position = parsed.get('pos') or parsed.get('position')
    if position:
        transform.position = parse_vector(position, ZERO_VECTOR)

    rotation = parsed.get('rot') or parsed.get('rotation')
    if rotation:
        transform.rotation = parse_vector(rotation, ZERO_VECTOR)

    scale = parsed.get('scale')
    if scale:
        transform.scale = parse_vector(scale, UNIT_VECTOR)

    return transform


def parse_tags(value: Any) -> List[str]:
    """Comma-separated string or list of strings; anything else is no tags."""
    if isinstance(value, str):
        return [tag.strip() for tag in value.split(',') if tag.strip()]
    if isinstance(value, list):
        return [tag for tag in value if isinstance(tag, str)]
    return []


# =============================================================================
# CONTENT NODES
# =============================================================================

def convert_object(node: FlowNode) -> Object3D:
    inputs = node.inputs
    primitive = optional_text(inputs.get('primitive'))
    return Object3D(
        id=node.id,
        name=node_name(node, 'Unnamed Object'),
        type=text_or(primitive, text_or(inputs.get('type'), DEFAULT_OBJECT_PRIMITIVE)),
        position=parse_vector(inputs.get('position'), ZERO_VECTOR),
        rotation=parse_vector(inputs.get('rotation'), ZERO_VECTOR),
        scale=parse_vector(inputs.get('scale'), UNIT_VECTOR),
        color=text_or(inputs.get('color'), DEFAULT_OBJECT_COLOR),
        primitive=primitive,
        visible=inputs.get('visible') is not False,
    )


def convert_camera(node: FlowNode) -> Camera:
    inputs = node.inputs
    return Camera(
        id=node.id,
        name=node_name(node, 'Unnamed Camera'),
        position=parse_vector(inputs.get('position'), CAMERA_POSITION),
        rotation=parse_vector(inputs.get('rotation'), ZERO_VECTOR),
        scale=parse_vector(inputs.get('scale'), UNIT_VECTOR),
        fov=number_or(inputs.get('fov'), CAMERA_FOV),
        near=number_or(inputs.get('near'), CAMERA_NEAR),
        far=number_or(inputs.get('far'), CAMERA_FAR),
    )


def convert_light(node: FlowNode) -> Light:
    inputs = node.inputs

    color = None
    raw_color = inputs.get('color')
    if raw_color:
        channels = raw_color if isinstance(raw_color, dict) else {}
        color = ColorRGB(
            r=number_or(channels.get('r'), 1),
            g=number_or(channels.get('g'), 1),
            b=number_or(channels.get('b'), 1),
        )

    return Light(
        id=node.id,
        name=node_name(node, 'Unnamed Light'),
        type=text_or(inputs.get('lightType'), DEFAULT_LIGHT_TYPE),
        position=parse_vector(inputs.get('position'), LIGHT_POSITION),
        rotation=parse_vector(inputs.get('rotation'), ZERO_VECTOR),
        scale=parse_vector(inputs.get('scale'), UNIT_VECTOR),
        color=color,
        intensity=number_or(inputs.get('intensity'), 1),
        distance=to_number(inputs.get('distance')),
        decay=to_number(inputs.get('decay')),
    )


def convert_data(node: FlowNode) -> DataNode:
    inputs = node.inputs
    objects = inputs.get('objects')
    return DataNode(
        id=node.id,
        name=node_name(node, 'Unnamed Data'),
        data_type=text_or(inputs.get('dataType'), DEFAULT_DATA_TYPE),
        content=inputs.get('content') or '',
        is_correct=is_flag_set(inputs.get('isCorrect')),
        next_space=optional_text(inputs.get('nextSpace')) or None,
        objects=objects if isinstance(objects, list) else [],
        enable_points=is_flag_set(inputs.get('enablePoints')),
        points_value=number_or(inputs.get('pointsValue'), 0),
        metadata=DataMetadata(
            difficulty=inputs.get('difficulty') or 1,
            tags=parse_tags(inputs.get('tags')),
        ),
    )


# =============================================================================
# ENTITY GRAPH NODES
# =============================================================================

def convert_entity(node: FlowNode) -> Entity:
    """Entity with empty component/event lists; the attacher fills them."""
    inputs = node.inputs
    return Entity(
        id=node.id,
        name=node_name(node, 'Unnamed Entity'),
        entity_type=text_or(inputs.get('entityType'), 'default'),
        transform=parse_transform(inputs.get('transform')),
        tags=parse_tags(inputs.get('tags')),
    )


def component_extras(component_type: str, inputs: Dict[str, Any]) -> Dict[str, Any]:
    """Type-specific component fields, keyed by record attribute name."""
    defaults = COMPONENT_EXTRA_DEFAULTS.get(component_type.lower(), {})
    extras = {}
    for key, default in defaults.items():
        if isinstance(default, str):
            extras[to_snake(key)] = text_or(inputs.get(key), default)
        else:
            extras[to_snake(key)] = number_or(inputs.get(key), default)
    return extras


def convert_component(node: FlowNode) -> Component:
    inputs = node.inputs
    component_type = text_or(inputs.get('componentType'), 'default')
    return Component(
        id=node.id,
        component_type=component_type,
        primitive=optional_text(inputs.get('primitive')),
        color=inputs.get('color'),
        script_name=optional_text(inputs.get('scriptName')),
        props=dict(parse_json_object(inputs.get('props')) or {}),
        **component_extras(component_type, inputs),
    )


def convert_event(node: FlowNode) -> Event:
    """Event seeded with any inline ``inputs.actions``; action edges append after them."""
    inputs = node.inputs
    return Event(
        id=node.id,
        event_type=text_or(inputs.get('eventType'), DEFAULT_EVENT_TYPE),
        source=inputs.get('source'),
        actions=inline_actions(inputs.get('actions')),
    )


def _build_action(action_id: str, fields: Dict[str, Any]) -> Action:
    params = fields.get('params')
    return Action(
        id=action_id,
        action_type=text_or(fields.get('actionType'), 'default'),
        target=fields.get('target'),
        params=dict(params) if isinstance(params, dict) else {},
    )


def inline_actions(value: Any) -> List[Action]:
    """Actions written directly on an event; entries without an id are skipped."""
    if not isinstance(value, list):
        return []
    actions = []
    for entry in value:
        if not isinstance(entry, dict):
            continue
        action_id = optional_text(entry.get('id'))
        if action_id:
            actions.append(_build_action(action_id, entry))
    return actions


def convert_action(node: FlowNode) -> Action:
    return _build_action(node.id, node.inputs)


def convert_universo(node: FlowNode) -> Dict[str, Any]:
    """Universo nodes are carried through as their raw editor data."""
    return dict(node.data)


# =============================================================================
# SPACE
# =============================================================================

def _lead_flag(inputs: Dict[str, Any], key: str, legacy_key: str) -> bool:
    value = inputs.get(key)
    if value is None:
        value = inputs.get(legacy_key)
    return is_flag_set(value)


def convert_space(node: Optional[FlowNode], **collections: Any) -> Space:
    """
    Space record for ``node`` holding the given collections.

    ``node`` may be None for flows without a Space node; the record then
    takes the default id and name.
    """
    inputs = node.inputs if node else {}
    return Space(
        id=node.id if node else DEFAULT_SPACE_ID,
        name=node_name(node, 'Unnamed Space') if node else 'Unnamed Space',
        space_type=text_or(inputs.get('spaceType'), 'default'),
        is_root_node=is_flag_set(inputs.get('isRootNode')),
        description=text_or(inputs.get('description'), ''),
        show_points=is_flag_set(inputs.get('showPoints')),
        lead_collection=LeadCollection(
            collect_name=_lead_flag(inputs, 'collectName', 'collectLeadName'),
            collect_email=_lead_flag(inputs, 'collectEmail', 'collectLeadEmail'),
            collect_phone=_lead_flag(inputs, 'collectPhone', 'collectLeadPhone'),
        ),
        settings=SpaceSettings(
            background=inputs.get('background') or DEFAULT_BACKGROUND,
            fog=inputs.get('fog'),
            physics=inputs.get('physics'),
        ),
        **collections,
    )


# Exhaustive kind -> converter table
CONVERTERS: Dict[NodeKind, Callable[[FlowNode], Any]] = {
    NodeKind.SPACE: convert_space,
    NodeKind.OBJECT: convert_object,
    NodeKind.CAMERA: convert_camera,
    NodeKind.LIGHT: convert_light,
    NodeKind.DATA: convert_data,
    NodeKind.ENTITY: convert_entity,
    NodeKind.COMPONENT: convert_component,
    NodeKind.EVENT: convert_event,
    NodeKind.ACTION: convert_action,
    NodeKind.UNIVERSO: convert_universo,
}


def convert_node(node: FlowNode) -> Any:
    """Convert any domain node; None for nodes without a kind."""
    if node.kind is None:
        return None
    return CONVERTERS[node.kind](node)


def convert_all(nodes: Sequence[FlowNode], kind: NodeKind) -> List[Any]:
    """Convert every node of ``kind``, keeping order."""
    converter = CONVERTERS[kind]
    return [converter(node) for node in nodes if node.kind is kind]
