"""
Event Records Module.

Discrete events delivered by the caller (store, UI) to the layout reducer.
Every record carries its EventType as a class attribute, and plain dict records
such as {'type': 'START_RESIZE', 'x': 2, 'y': 1} can be parsed with
`event_from_dict`.
"""
from dataclasses import dataclass, field, fields
from typing import Any, ClassVar, Dict, Type, Union
from dashgrid.enums import EventType

@dataclass(frozen=True)
class StartResize:
    type: ClassVar[EventType] = EventType.START_RESIZE
    x: int
    y: int

@dataclass(frozen=True)
class StartMove:
    type: ClassVar[EventType] = EventType.START_MOVE
    x: int
    y: int

@dataclass(frozen=True)
class DragOver:
    type: ClassVar[EventType] = EventType.DRAG_OVER
    x: int
    y: int

@dataclass(frozen=True)
class EndResize:
    type: ClassVar[EventType] = EventType.END_RESIZE
    x: int
    y: int
    start_x: int
    start_y: int

@dataclass(frozen=True)
class EndMove:
    type: ClassVar[EventType] = EventType.END_MOVE
    x: int
    y: int
    start_x: int
    start_y: int

@dataclass(frozen=True)
class UpdatePanelData:
    type: ClassVar[EventType] = EventType.UPDATE_PANEL_DATA
    x: int
    y: int
    data: Dict[str, Any] = field(default_factory=dict)

@dataclass(frozen=True)
class ResetPanel:
    type: ClassVar[EventType] = EventType.RESET_PANEL
    x: int
    y: int

Event = Union[StartResize, StartMove, DragOver, EndResize, EndMove, UpdatePanelData, ResetPanel]

EVENT_REGISTRY: Dict[EventType, Type] = {
    cls.type: cls for cls in (StartResize, StartMove, DragOver, EndResize, EndMove, UpdatePanelData, ResetPanel)
}

# Dict records may use the camelCase keys of the dashboard actions.
_KEY_ALIASES = {'startX': 'start_x', 'startY': 'start_y'}

def event_from_dict(record: Dict[str, Any]) -> Event:
    """Builds the event record matching record['type']."""
    try:
        event_type = EventType(record['type'])
    except (KeyError, ValueError):
        raise ValueError(f"Unknown event record: {record!r}")

    event_class = EVENT_REGISTRY[event_type]
    accepted = {f.name for f in fields(event_class)}
    kwargs = {}
    for key, value in record.items():
        name = _KEY_ALIASES.get(key, key)
        if name in accepted:
            kwargs[name] = value
    try:
        return event_class(**kwargs)
    except TypeError as e:
        raise ValueError(f"Malformed {event_type.value} record {record!r}: {e}")
