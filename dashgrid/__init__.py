"""Grid occupancy and drag-validation engine for a panel dashboard."""
from dashgrid.area import Area
from dashgrid.grid import Grid
from dashgrid.models import Panel, DragState, LayoutState
from dashgrid.reducer import LayoutReducer

__all__ = ['Area', 'Grid', 'Panel', 'DragState', 'LayoutState', 'LayoutReducer']
