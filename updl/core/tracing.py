"""
UPDL Compiler Tracing

Passive pub/sub hook for observing compilation. Subscribers receive
TraceEvents as the compiler walks the flow; nothing they do can change
the compiled output.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional

from .logging_config import get_logger

logger = get_logger("core.tracing")


@dataclass
class TraceEvent:
    """A single diagnostic event emitted during compilation."""
    name: str
    data: Dict[str, Any] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=datetime.now)

    @property
    def topic(self) -> str:
        """First dotted segment of the event name (``chain`` for ``chain.link``)."""
        return self.name.split(".", 1)[0]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "data": self.data,
            "timestamp": self.timestamp.isoformat(),
        }


TraceHandler = Callable[[TraceEvent], None]


@dataclass
class Subscription:
    """A handler registered for all events or one topic."""
    sub_id: str
    handler: TraceHandler
    topic: Optional[str] = None

    def accepts(self, event: TraceEvent) -> bool:
        return self.topic is None or self.topic in (event.topic, event.name)


class CompilerTracer:
    """
    Synchronous event emitter handed to the compiler.

    Usage:
        tracer = CompilerTracer()
        tracer.subscribe(lambda event: print(event.name), topic="chain")
        process_flow_data(flow_json, tracer=tracer)
    """

    def __init__(self):
        self._subscriptions: List[Subscription] = []
        self._next_sub_id = 0
        self._events_emitted = 0

    @property
    def events_emitted(self) -> int:
        return self._events_emitted

    def subscribe(self, handler: TraceHandler, topic: Optional[str] = None) -> str:
        """
        Register a handler.

        Args:
            handler: Called with every matching TraceEvent
            topic: Event name or its first segment; None receives everything

        Returns:
            Subscription ID for ``unsubscribe``
        """
        self._next_sub_id += 1
        sub_id = f"sub_{self._next_sub_id:06d}"
        self._subscriptions.append(Subscription(sub_id=sub_id, handler=handler, topic=topic))
        return sub_id

    def unsubscribe(self, sub_id: str) -> bool:
        """Remove a subscription. Returns False if it was not registered."""
        for index, sub in enumerate(self._subscriptions):
            if sub.sub_id == sub_id:
                del self._subscriptions[index]
                return True
        return False

    def emit(self, name: str, **data: Any) -> TraceEvent:
        """Build a TraceEvent and deliver it to matching subscribers."""
        event = TraceEvent(name=name, data=data)
        self._events_emitted += 1

        for sub in list(self._subscriptions):
            if not sub.accepts(event):
                continue
            try:
                sub.handler(event)
            except Exception as e:
                logger.error(f"Trace handler {sub.sub_id} failed on {name}: {e}")

        return event


class NullTracer(CompilerTracer):
    """Tracer that drops every event."""

    def emit(self, name: str, **data: Any) -> TraceEvent:
        return TraceEvent(name=name, data=data)


class RecordingTracer(CompilerTracer):
    """Tracer that keeps every event it sees, in order."""

    def __init__(self):
        super().__init__()
        self.events: List[TraceEvent] = []
        self.subscribe(self.events.append)

    def names(self) -> List[str]:
        return [event.name for event in self.events]
