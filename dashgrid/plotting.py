"""
Plotting and Visualization Module.
Draws the board as a plotly figure: one rectangle per visible panel, coloured by
its payload, with the adorner overlay of an in-progress drag drawn on top.
Row 1 is drawn at the top, as on the dashboard.
"""
import plotly.graph_objects as go
from typing import Any, Dict, List

from dashgrid.config import (
    ADORNER_COLORS, BACKGROUND_COLOR, CELL_GAP, CELL_SIZE, EMPTY_PANEL_COLOR,
    FILLED_PANEL_COLOR, GRID_COLOR, PLOT_AREA_COLOR, TEXT_COLOR
)
from dashgrid.models import LayoutState, Panel
from dashgrid.summary import anchored_panels

# ==============================================================================
# --- Private Helper Functions ---
# ==============================================================================

def _cell_box(x: int, y: int, dx: int, dy: int, rows: int) -> Dict[str, float]:
    """Figure coordinates of a rectangle of cells, with a gap on every side."""
    return dict(
        x0=(x - 1) * CELL_SIZE + CELL_GAP,
        x1=(x - 1 + dx) * CELL_SIZE - CELL_GAP,
        y0=(rows - (y - 1) - dy) * CELL_SIZE + CELL_GAP,
        y1=(rows - (y - 1)) * CELL_SIZE - CELL_GAP,
    )

def _panel_label(panel: Panel) -> str:
    title = panel.data.get('title') if isinstance(panel.data, dict) else None
    return title or f"({panel.x}, {panel.y})"

# ==============================================================================
# --- Public API Functions ---
# ==============================================================================

def create_panel_shapes(state: LayoutState, rows: int, columns: int) -> List[Dict[str, Any]]:
    """Creates one filled rectangle per visible panel."""
    shapes = []
    for panel in anchored_panels(state.panels, rows, columns):
        fill = EMPTY_PANEL_COLOR if panel.is_empty else FILLED_PANEL_COLOR
        shapes.append(dict(
            type="rect", **_cell_box(panel.x, panel.y, panel.dx, panel.dy, rows),
            line=dict(color=GRID_COLOR, width=2), fillcolor=fill, layer='below'
        ))
    return shapes

def create_adorner_shapes(state: LayoutState, rows: int) -> List[Dict[str, Any]]:
    """Creates a translucent overlay on every cell with a non-neutral adorner status."""
    shapes = []
    for panel in state.panels:
        color = ADORNER_COLORS.get(panel.adorner_status)
        if color is None:
            continue
        shapes.append(dict(
            type="rect", **_cell_box(panel.x, panel.y, 1, 1, rows),
            line=dict(color=color, width=3), fillcolor=color, opacity=0.45, layer='above'
        ))
    return shapes

def create_label_annotations(state: LayoutState, rows: int, columns: int) -> List[Dict[str, Any]]:
    annotations = []
    for panel in anchored_panels(state.panels, rows, columns):
        box = _cell_box(panel.x, panel.y, panel.dx, panel.dy, rows)
        annotations.append(dict(
            x=(box['x0'] + box['x1']) / 2, y=(box['y0'] + box['y1']) / 2,
            text=_panel_label(panel), showarrow=False, font=dict(color=TEXT_COLOR, size=12)
        ))
    return annotations

def create_board_figure(state: LayoutState, rows: int, columns: int) -> go.Figure:
    """Builds the full board figure for a layout snapshot."""
    fig = go.Figure()
    fig.update_layout(
        shapes=create_panel_shapes(state, rows, columns) + create_adorner_shapes(state, rows),
        annotations=create_label_annotations(state, rows, columns),
        plot_bgcolor=PLOT_AREA_COLOR,
        paper_bgcolor=BACKGROUND_COLOR,
        margin=dict(l=10, r=10, t=10, b=10),
        height=max(300, rows * CELL_SIZE),
        showlegend=False,
    )
    fig.update_xaxes(range=[0, columns * CELL_SIZE], visible=False, fixedrange=True)
    fig.update_yaxes(range=[0, rows * CELL_SIZE], visible=False, fixedrange=True, scaleanchor="x")
    return fig
