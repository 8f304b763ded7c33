"""
State Management Module.
Implements the 'Store' pattern: the Grid and the current LayoutState live in
Streamlit's session state (or any mapping handed in), and every change goes
through `dispatch`.
"""
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, MutableMapping, Optional, Set, Tuple, Union

import streamlit as st

from dashgrid.config import DEFAULT_ROWS, DEFAULT_COLUMNS, GRID_SESSION_KEY, STATE_SESSION_KEY
from dashgrid.enums import EventType
from dashgrid.events import Event, event_from_dict
from dashgrid.grid import Grid
from dashgrid.models import LayoutState
from dashgrid.reducer import LayoutReducer

logger = logging.getLogger(__name__)

Cell = Tuple[int, int]
Middleware = Callable[["DashboardStore", Event], None]


def released_cells(event: Event, state: LayoutState) -> Set[Cell]:
    """
    Cells whose panel-bound resources must be released when `event` is applied
    to `state`: the reset cell, or both ends of a move about to be committed.
    """
    if event.type is EventType.RESET_PANEL:
        return {(event.x, event.y)}
    if event.type is EventType.END_MOVE and state.active is not None and state.active.valid is True:
        return {(event.start_x, event.start_y), (event.x, event.y)}
    return set()


class PanelRegistry:
    """
    Cell-keyed registry of external resources bound to a panel (data sources,
    subscriptions...). Entries are released when their panel is reset or moved.
    """
    def __init__(self):
        self._entries: Dict[Cell, Any] = {}

    def register(self, x: int, y: int, resource: Any):
        self._entries[(x, y)] = resource

    def find(self, x: int, y: int) -> Optional[Any]:
        return self._entries.get((x, y))

    def release(self, x: int, y: int) -> Optional[Any]:
        resource = self._entries.pop((x, y), None)
        if resource is not None:
            logger.info(f"Released resource bound to panel ({x}, {y}).")
            close = getattr(resource, 'close', None)
            if callable(close):
                close()
        return resource

    def __contains__(self, cell: Cell) -> bool:
        return cell in self._entries

    def __len__(self) -> int:
        return len(self._entries)


def registry_sync_middleware(registry: PanelRegistry) -> Middleware:
    """Middleware keeping `registry` in sync with panel resets and moves."""
    def middleware(store: "DashboardStore", event: Event):
        for x, y in sorted(released_cells(event, store.layout)):
            registry.release(x, y)
    return middleware


@dataclass
class DashboardStore:
    """
    Centralized store for the board.
    Wraps st.session_state so the grid survives Streamlit reruns; tests may pass
    a plain dict as `session`.
    """
    rows: int = DEFAULT_ROWS
    columns: int = DEFAULT_COLUMNS
    session: Optional[MutableMapping] = None
    middlewares: List[Middleware] = field(default_factory=list)

    def __post_init__(self):
        if self.session is None:
            self.session = st.session_state

        grid = self.session.get(GRID_SESSION_KEY)
        if grid is None or (grid.rows, grid.columns) != (self.rows, self.columns):
            self._build()
        self._reducer = LayoutReducer(self.session[GRID_SESSION_KEY])

    def _build(self):
        logger.info(f"Creating a {self.rows}x{self.columns} board.")
        grid = Grid(self.rows, self.columns)
        self.session[GRID_SESSION_KEY] = grid
        self.session[STATE_SESSION_KEY] = LayoutReducer(grid).initial_state()

    # --- Properties for Typed Access ---

    @property
    def grid(self) -> Grid:
        return self.session[GRID_SESSION_KEY]

    @property
    def layout(self) -> LayoutState:
        return self.session[STATE_SESSION_KEY]

    @layout.setter
    def layout(self, val: LayoutState):
        self.session[STATE_SESSION_KEY] = val

    # --- Actions ---

    def use(self, middleware: Middleware):
        """Registers a middleware run before every event is reduced."""
        self.middlewares.append(middleware)

    def dispatch(self, event: Union[Event, Dict[str, Any]]) -> LayoutState:
        if isinstance(event, dict):
            event = event_from_dict(event)
        for middleware in self.middlewares:
            middleware(self, event)
        self.layout = self._reducer(self.layout, event)
        return self.layout

    def reset(self):
        """Discards the board and starts from empty panels."""
        self._build()
        self._reducer = LayoutReducer(self.grid)
