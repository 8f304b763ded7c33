"""
Layout Reducer Module.

Consumes drag events against a Grid and returns a new LayoutState for each one.
While a drag is active, DRAG_OVER recomputes the adorner status of every cell
(1 for the candidate placement, -1 for conflicting panels, 0 elsewhere) and
whether the candidate may be committed. END_RESIZE / END_MOVE commit the
candidate when it is valid and always clear the transient drag state.
"""
import logging
from dataclasses import replace
from typing import Callable, Dict

from dashgrid.area import Area
from dashgrid.enums import AdornerStatus, EventType, Operation
from dashgrid.events import (
    Event, StartResize, StartMove, DragOver, EndResize, EndMove, UpdatePanelData, ResetPanel
)
from dashgrid.grid import Grid
from dashgrid.models import DragState, LayoutState

logger = logging.getLogger(__name__)


class LayoutReducer:
    """
    Pure (state, event) -> state function over a Grid. The grid is the only
    mutable collaborator; it is written to at commit time and when adorner
    statuses are recomputed.
    """

    def __init__(self, grid: Grid):
        self.grid = grid
        self._handlers: Dict[EventType, Callable[[LayoutState, Event], LayoutState]] = {
            EventType.START_RESIZE: self._start_resize,
            EventType.START_MOVE: self._start_move,
            EventType.DRAG_OVER: self._drag_over,
            EventType.END_RESIZE: self._end_resize,
            EventType.END_MOVE: self._end_move,
            EventType.UPDATE_PANEL_DATA: self._update_panel_data,
            EventType.RESET_PANEL: self._reset_panel,
        }

    def initial_state(self) -> LayoutState:
        return LayoutState(active=None, panels=self.grid.snapshot())

    def __call__(self, state: LayoutState, event: Event) -> LayoutState:
        handler = self._handlers.get(event.type)
        if handler is None:
            logger.debug(f"No handler for {event.type}; state unchanged.")
            return state
        logger.debug(f"Handling {event}")
        return handler(state, event)

    # --- Helpers ---

    def _snapshot(self, state: LayoutState, **changes) -> LayoutState:
        return replace(state, panels=self.grid.snapshot(), **changes)

    def _conflicts(self, cells: Area, target: Area) -> Area:
        """
        Union of the footprints of the panels stored at `cells` which overlap
        `target` without being entirely contained in it.
        """
        conflict = self.grid.empty_area()
        for x, y in cells:
            footprint = self.grid.panel(x, y)
            if len(footprint.intersection(target)) > 0 and not target.includes(footprint):
                conflict = conflict.union(footprint)
        return conflict

    def _mark(self, candidate: Area, conflict: Area):
        for x, y in candidate.complement():
            self.grid.update_at(x, y, adorner_status=AdornerStatus.NEUTRAL.value)
        for x, y in candidate:
            self.grid.update_at(x, y, adorner_status=AdornerStatus.HIGHLIGHTED.value)
        # Conflicts override the candidate marks.
        for x, y in conflict:
            self.grid.update_at(x, y, adorner_status=AdornerStatus.INVALID.value)

    def _finish(self, state: LayoutState) -> LayoutState:
        self.grid.reset_adorners()
        return self._snapshot(state, active=None)

    # --- Start ---

    def _start(self, state: LayoutState, event, operation: Operation) -> LayoutState:
        if state.active is not None:
            logger.warning(f"Ignoring {event.type.value} at ({event.x}, {event.y}): a {state.active.operation.value} drag is already active.")
            return state
        return replace(state, active=DragState(event.x, event.y, operation))

    def _start_resize(self, state: LayoutState, event: StartResize) -> LayoutState:
        return self._start(state, event, Operation.RESIZE)

    def _start_move(self, state: LayoutState, event: StartMove) -> LayoutState:
        return self._start(state, event, Operation.MOVE)

    # --- Drag over ---

    def _drag_over(self, state: LayoutState, event: DragOver) -> LayoutState:
        active = state.active
        if active is None:
            logger.debug(f"DRAG_OVER at ({event.x}, {event.y}) without an active drag; ignored.")
            return state
        if active.operation is Operation.RESIZE:
            return self._resize_over(state, event)
        return self._move_over(state, event)

    def _resize_over(self, state: LayoutState, event: DragOver) -> LayoutState:
        anchor = state.active
        if event.x < anchor.x or event.y < anchor.y:
            # Resize only grows south-east; the previous marks stay as they are.
            return replace(state, active=replace(anchor, valid=False))

        dx = event.x - anchor.x + 1
        dy = event.y - anchor.y + 1
        active_area = self.grid.area(anchor.x, anchor.y, dx, dy)
        all_but_anchor = self.grid.area(anchor.x, anchor.y).complement()
        conflict = self._conflicts(all_but_anchor, active_area)

        self._mark(active_area, conflict)
        return self._snapshot(state, active=replace(anchor, valid=len(conflict) == 0))

    def _move_over(self, state: LayoutState, event: DragOver) -> LayoutState:
        anchor = state.active
        moving = self.grid.get_data(anchor.x, anchor.y)
        original_area = self.grid.panel(anchor.x, anchor.y)
        expected_area = self.grid.area(event.x, event.y, moving.dx, moving.dy)
        candidate = original_area.union(expected_area)

        if len(expected_area) < len(original_area):
            # The target rectangle is clipped by the grid bounds.
            conflict = candidate
        else:
            conflict = self._conflicts(original_area.complement(), expected_area)

        self._mark(candidate, conflict)
        return self._snapshot(state, active=replace(anchor, valid=len(conflict) == 0))

    # --- Commit ---

    def _end_resize(self, state: LayoutState, event: EndResize) -> LayoutState:
        dx = event.x - event.start_x + 1
        dy = event.y - event.start_y + 1
        if state.active is not None and state.active.valid is True and dx >= 1 and dy >= 1:
            active_area = self.grid.area(event.start_x, event.start_y, dx, dy)
            self.grid.update_at(event.start_x, event.start_y, dx=dx, dy=dy)
            # Swallowed panels are shrunk back to a single cell; their data is kept.
            for x, y in active_area:
                if (x, y) != (event.start_x, event.start_y):
                    self.grid.update_at(x, y, dx=1, dy=1)
            logger.info(f"Resized panel ({event.start_x}, {event.start_y}) to {dx}x{dy}.")
        return self._finish(state)

    def _end_move(self, state: LayoutState, event: EndMove) -> LayoutState:
        if state.active is not None and state.active.valid is True:
            delta_x = event.start_x - event.x
            delta_y = event.start_y - event.y
            start_data = self.grid.get_data(event.start_x, event.start_y).as_dict()
            claimed_area = self.grid.area(event.x, event.y, start_data['dx'], start_data['dy'])

            # Whatever occupies the destination is translated back, cell by cell.
            for cx, cy in claimed_area:
                occupant = self.grid.get_data(cx, cy).as_dict()
                self.grid.update_at(cx + delta_x, cy + delta_y, occupant, x=cx + delta_x, y=cy + delta_y)

            self.grid.update_at(event.x, event.y, start_data, x=event.x, y=event.y)
            logger.info(f"Moved panel ({event.start_x}, {event.start_y}) to ({event.x}, {event.y}).")
        return self._finish(state)

    # --- Data ---

    def _update_panel_data(self, state: LayoutState, event: UpdatePanelData) -> LayoutState:
        self.grid.update_at(event.x, event.y, data=event.data)
        return self._snapshot(state)

    def _reset_panel(self, state: LayoutState, event: ResetPanel) -> LayoutState:
        self.grid.update_at(event.x, event.y, data={})
        return self._snapshot(state)
