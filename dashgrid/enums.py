"""
Enum Definitions Module.

This module contains Enumeration classes for the constant sets of values used
by the layout engine: drag operations, per-cell adorner statuses and the
event names understood by the reducer.
"""
from enum import Enum

class Operation(Enum):
    """Enumeration for the two drag operations a panel supports."""
    RESIZE = "resize"
    MOVE = "move"

    @classmethod
    def values(cls) -> list[str]:
        """Returns the string values of all enum members."""
        return [item.value for item in cls]

class AdornerStatus(Enum):
    """Enumeration for the transient highlight hint of a cell during a drag."""
    INVALID = -1
    NEUTRAL = 0
    HIGHLIGHTED = 1

    @classmethod
    def values(cls) -> list[int]:
        """Returns the integer values of all enum members."""
        return [item.value for item in cls]

class EventType(Enum):
    """Enumeration for the event records consumed by the layout reducer."""
    START_RESIZE = "START_RESIZE"
    START_MOVE = "START_MOVE"
    DRAG_OVER = "DRAG_OVER"
    END_RESIZE = "END_RESIZE"
    END_MOVE = "END_MOVE"
    UPDATE_PANEL_DATA = "UPDATE_PANEL_DATA"
    RESET_PANEL = "RESET_PANEL"

    @classmethod
    def values(cls) -> list[str]:
        """Returns the string values of all enum members."""
        return [item.value for item in cls]
