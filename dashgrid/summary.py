"""
Board Summary Module.
Tabular and matrix views of a layout snapshot, used by the dashboard to show
the panel registry next to the board.
"""
from typing import List, Sequence
import numpy as np
import pandas as pd

from dashgrid.area import Area
from dashgrid.models import LayoutState, Panel

PANEL_COLUMNS = ['x', 'y', 'dx', 'dy', 'adorner_status', 'data']

def panels_to_frame(panels: Sequence[Panel]) -> pd.DataFrame:
    """Returns one row per panel record, in cell order."""
    if not panels:
        return pd.DataFrame(columns=PANEL_COLUMNS)
    return pd.DataFrame([p.as_dict() for p in panels], columns=PANEL_COLUMNS)

def occupancy_matrix(state: LayoutState, rows: int, columns: int) -> np.ndarray:
    """
    Adorner status of every cell as a rows x columns matrix; entry [y-1, x-1]
    belongs to cell (x, y).
    """
    matrix = np.zeros((rows, columns), dtype=int)
    for p in state.panels:
        matrix[p.y - 1, p.x - 1] = p.adorner_status
    return matrix

def anchored_panels(panels: Sequence[Panel], rows: int, columns: int) -> List[Panel]:
    """
    Panels that are visible on the board: records lying under the footprint
    of an earlier, larger panel are hidden by it.
    """
    covered = Area.empty(rows, columns)
    visible = []
    for p in panels:
        if p.cell in covered:
            continue
        visible.append(p)
        covered = covered.union(Area.from_rectangle(rows, columns, p.x, p.y, p.dx, p.dy))
    return visible
