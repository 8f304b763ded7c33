import numpy as np
import pandas as pd
import pytest
from dashgrid.grid import Grid
from dashgrid.models import DragState, LayoutState
from dashgrid.enums import Operation
from dashgrid.events import DragOver
from dashgrid.reducer import LayoutReducer
from dashgrid.summary import panels_to_frame, occupancy_matrix, anchored_panels, PANEL_COLUMNS

@pytest.fixture
def grid() -> Grid:
    g = Grid(rows=2, columns=3)
    g.update_at(1, 1, dx=2, data={'title': 'wide'})
    return g

def test_panels_to_frame(grid):
    df = panels_to_frame(grid.snapshot())
    assert isinstance(df, pd.DataFrame)
    assert list(df.columns) == PANEL_COLUMNS
    assert len(df) == 6
    assert df.loc[0, 'dx'] == 2
    assert df.loc[0, 'data'] == {'title': 'wide'}

def test_panels_to_frame_empty():
    df = panels_to_frame(())
    assert df.empty
    assert list(df.columns) == PANEL_COLUMNS

def test_occupancy_matrix():
    grid = Grid(rows=2, columns=2)
    reducer = LayoutReducer(grid)
    grid.update_at(1, 2, dx=2)
    state = reducer(LayoutState(active=DragState(2, 1, Operation.RESIZE)), DragOver(2, 2))
    matrix = occupancy_matrix(state, 2, 2)
    assert matrix.shape == (2, 2)
    np.testing.assert_array_equal(matrix, np.array([[0, 1], [-1, -1]]))

def test_anchored_panels_hides_covered_records(grid):
    visible = anchored_panels(grid.snapshot(), 2, 3)
    assert [p.cell for p in visible] == [(1, 1), (3, 1), (1, 2), (2, 2), (3, 2)]
