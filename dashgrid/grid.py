"""
Grid Module.
Panel registry for a fixed rows x columns board and the bridge between panel
geometry and Areas.

The grid always holds exactly one Panel record per cell. A panel spanning
several cells is represented by its anchor record; the other cells it covers
keep their own records. Overlap is prevented by the layout reducer at commit
time, not by the storage itself.
"""
import copy
import logging
from typing import Any, Dict, Iterator, List, Optional, Sequence, Tuple

from dashgrid.area import Area, cell_from_index, index_from_cell
from dashgrid.config import DEFAULT_ROWS, DEFAULT_COLUMNS
from dashgrid.enums import AdornerStatus
from dashgrid.models import Panel

logger = logging.getLogger(__name__)


class Grid:
    """
    Owns one Panel per cell, stored in row-major order. Initial panels are
    placed by their own (x, y), whatever order they are given in.
    """
    def __init__(self, rows: int = DEFAULT_ROWS, columns: int = DEFAULT_COLUMNS, panels: Optional[Sequence[Panel]] = None):
        if rows < 1 or columns < 1:
            raise ValueError(f"Invalid grid size {rows}x{columns}. Rows and columns must be >= 1.")
        self.rows = rows
        self.columns = columns

        if panels is not None and len(panels) == rows * columns:
            self._panels: List[Panel] = self._place(panels)
        else:
            if panels:
                logger.warning(f"Ignoring {len(panels)} initial panels for a {rows}x{columns} grid; using empty panels.")
            self._panels = [Panel(*cell_from_index(rows, columns, i)) for i in range(rows * columns)]

    def _place(self, panels: Sequence[Panel]) -> List[Panel]:
        """Stores copies of the given records at the cell named by their own (x, y)."""
        placed: List[Optional[Panel]] = [None] * (self.rows * self.columns)
        for p in panels:
            try:
                index = self._index(p.x, p.y)
            except IndexError as e:
                raise ValueError(f"Invalid initial panel: {e}")
            if placed[index] is not None:
                raise ValueError(f"Duplicate initial panel at ({p.x}, {p.y}).")
            placed[index] = copy.copy(p)
        return placed

    def _index(self, x: int, y: int) -> int:
        if not (1 <= x <= self.columns and 1 <= y <= self.rows):
            raise IndexError(f"Cell ({x}, {y}) is outside the {self.rows}x{self.columns} grid.")
        return index_from_cell(self.rows, self.columns, x, y)

    # --- Geometry ---

    def area(self, x: int, y: int, dx: int = 1, dy: int = 1) -> Area:
        """Area of an arbitrary rectangle; no panel needs to be anchored there."""
        return Area.from_rectangle(self.rows, self.columns, x, y, dx, dy)

    def empty_area(self) -> Area:
        return Area.empty(self.rows, self.columns)

    def panel(self, x: int, y: int) -> Area:
        """Full footprint of the panel record stored at (x, y), using its own span."""
        p = self._panels[self._index(x, y)]
        return self.area(p.x, p.y, p.dx, p.dy)

    # --- Records ---

    def get_data(self, x: int, y: int) -> Panel:
        """Returns the live Panel record at (x, y)."""
        return self._panels[self._index(x, y)]

    def update_at(self, x: int, y: int, partial: Optional[Dict[str, Any]] = None, /, **fields) -> Panel:
        """
        Merges the given fields into the record at (x, y) in place and returns it.
        This is the only mutation entry point of the grid.
        """
        changes = dict(partial or {}, **fields)
        unknown = set(changes) - set(Panel.field_names())
        if unknown:
            raise ValueError(f"Unknown panel fields: {sorted(unknown)}")

        record = self._panels[self._index(x, y)]
        for name, value in changes.items():
            setattr(record, name, value)
        return record

    def reset_adorners(self):
        for record in self._panels:
            record.adorner_status = AdornerStatus.NEUTRAL.value

    # --- Iteration ---

    def __iter__(self) -> Iterator[Panel]:
        for record in self._panels:
            yield copy.copy(record)

    def __len__(self) -> int:
        return len(self._panels)

    def snapshot(self) -> Tuple[Panel, ...]:
        return tuple(self)

