"""
UPDL Entity Attacher

Wires behavior records onto entities by following edges. The same function
serves the single-space path (whole canvas) and the per-scene path (edges
scoped to one scene), so the two can never drift apart.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, List, Optional

from updl.core.logging_config import get_logger
from updl.core.tracing import CompilerTracer, NullTracer
from updl.models.records import Action, Component, Entity, Event

if TYPE_CHECKING:
    from updl.models.nodes import FlowEdge

logger = get_logger("compiler.attacher")


@dataclass
class AttachmentReport:
    """How many edges matched each attachment rule."""
    components: int = 0
    events: int = 0
    actions: int = 0
    ignored: int = 0

    @property
    def total(self) -> int:
        return self.components + self.events + self.actions


def attach_relationships(
    entities: List[Entity],
    components: List[Component],
    events: List[Event],
    actions: List[Action],
    edges: Iterable['FlowEdge'],
    tracer: Optional[CompilerTracer] = None,
    scope: Optional[str] = None,
) -> AttachmentReport:
    """
    Apply edges to the records, first matching rule wins:

    1. component -> entity: component joins ``entity.components``
    2. event -> entity: event joins ``entity.events``
    3. action -> event: action joins ``event.actions``

    Edges matching no rule are ignored. Records are appended in edge order.

    Args:
        entities, components, events, actions: Converted records of one scope
        edges: Edges of the same scope, in editor order
        tracer: Receives one ``attach.*`` event per attachment
        scope: Space id used in log lines and trace events
    """
    tracer = tracer or NullTracer()
    entity_map = {entity.id: entity for entity in entities}
    component_map = {component.id: component for component in components}
    event_map = {event.id: event for event in events}
    action_map = {action.id: action for action in actions}

    report = AttachmentReport()
    prefix = f"Scene {scope}: " if scope else ""

    for edge in edges:
        source_id, target_id = edge.source, edge.target

        if source_id in component_map and target_id in entity_map:
            entity = entity_map[target_id]
            component = component_map[source_id]
            entity.components.append(component)
            report.components += 1
            logger.debug(
                f"{prefix}Attached component {component.component_type} "
                f"to entity {entity.id} ({entity.entity_type})"
            )
            tracer.emit("attach.component", scope=scope, entity=entity.id, component=component.id)
        elif source_id in event_map and target_id in entity_map:
            entity = entity_map[target_id]
            event = event_map[source_id]
            entity.events.append(event)
            report.events += 1
            logger.debug(f"{prefix}Attached event {event.event_type} to entity {entity.id}")
            tracer.emit("attach.event", scope=scope, entity=entity.id, event=event.id)
        elif source_id in action_map and target_id in event_map:
            event = event_map[target_id]
            action = action_map[source_id]
            event.actions.append(action)
            report.actions += 1
            logger.debug(f"{prefix}Attached action {action.action_type} to event {event.id}")
            tracer.emit("attach.action", scope=scope, event=event.id, action=action.id)
        else:
            report.ignored += 1

    return report
