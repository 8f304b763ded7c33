"""
Domain Models for the Dashboard Layout.
Panel records stored in the grid, the drag in progress, and the snapshot handed
to the renderer.
"""
from dataclasses import dataclass, field, fields
from typing import Any, Dict, Optional, Tuple
from dashgrid.enums import Operation, AdornerStatus

@dataclass
class Panel:
    """
    One record of the grid. (x, y) is the anchor cell; dx, dy the span in
    columns and rows. `data` is an opaque payload owned by the caller.
    """
    x: int
    y: int
    dx: int = 1
    dy: int = 1
    adorner_status: int = AdornerStatus.NEUTRAL.value
    data: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def field_names(cls) -> Tuple[str, ...]:
        return tuple(f.name for f in fields(cls))

    @property
    def cell(self) -> Tuple[int, int]:
        return self.x, self.y

    @property
    def is_empty(self) -> bool:
        return not self.data

    def as_dict(self) -> Dict[str, Any]:
        """Shallow field mapping; `data` is shared, not copied."""
        return {f.name: getattr(self, f.name) for f in fields(self)}


@dataclass(frozen=True)
class DragState:
    """The drag in progress: anchor cell of the dragged panel and its operation."""
    x: int
    y: int
    operation: Operation
    valid: Optional[bool] = None


@dataclass(frozen=True)
class LayoutState:
    """
    Externally visible snapshot. Regenerated on every event; `panels` holds
    copies of every grid record in cell order.
    """
    active: Optional[DragState] = None
    panels: Tuple[Panel, ...] = ()

    @property
    def is_dragging(self) -> bool:
        return self.active is not None

    def panel_at(self, x: int, y: int) -> Optional[Panel]:
        return next((p for p in self.panels if p.x == x and p.y == y), None)
