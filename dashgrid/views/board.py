import json
import logging
import streamlit as st

from dashgrid.enums import Operation
from dashgrid.events import StartResize, StartMove, DragOver, EndResize, EndMove, UpdatePanelData, ResetPanel
from dashgrid.plotting import create_board_figure
from dashgrid.state import DashboardStore
from dashgrid.summary import occupancy_matrix, panels_to_frame

logger = logging.getLogger(__name__)

def _dispatch(store: DashboardStore, event) -> bool:
    """Dispatches an event, reporting programming errors in the UI instead of crashing."""
    try:
        store.dispatch(event)
    except (IndexError, ValueError) as e:
        logger.error(f"Failed to apply {event}: {e}")
        st.error(f"Could not apply {event.type.value}: {e}")
        return False
    return True

def _cell_inputs(store: DashboardStore, label: str, key: str):
    col_x, col_y = st.columns(2)
    with col_x:
        x = st.number_input(f"{label} column", min_value=1, max_value=store.columns, value=1, key=f"{key}_x")
    with col_y:
        y = st.number_input(f"{label} row", min_value=1, max_value=store.rows, value=1, key=f"{key}_y")
    return int(x), int(y)

def render_drag_controls(store: DashboardStore):
    """Sidebar controls standing in for pointer drags: start, drag over, end."""
    active = store.layout.active

    with st.expander("🖱️ Drag", expanded=True):
        if not store.layout.is_dragging:
            operation = st.radio("Operation", Operation.values(), horizontal=True, key="drag_operation")
            x, y = _cell_inputs(store, "Panel", "drag_start")
            if st.button("Start drag"):
                event = StartResize(x, y) if operation == Operation.RESIZE.value else StartMove(x, y)
                if _dispatch(store, event):
                    st.rerun()
            return

        st.info(f"{active.operation.value.capitalize()} of panel ({active.x}, {active.y}) in progress.")
        x, y = _cell_inputs(store, "Target", "drag_target")
        if st.button("Drag over"):
            if _dispatch(store, DragOver(x, y)):
                st.rerun()

        if active.valid is None:
            st.caption("Drag over a target cell to validate the placement.")
        elif active.valid:
            st.success("Placement is valid.")
        else:
            st.warning("Placement conflicts with other panels.")

        if st.button("End drag", type="primary"):
            end = EndResize if active.operation is Operation.RESIZE else EndMove
            if _dispatch(store, end(x, y, active.x, active.y)):
                st.rerun()

def render_panel_controls(store: DashboardStore):
    """Sidebar controls editing the data payload of a panel."""
    with st.expander("📝 Panel Data", expanded=False):
        x, y = _cell_inputs(store, "Panel", "panel_data")
        current = store.grid.get_data(x, y).data
        raw = st.text_area("Data (JSON)", value=json.dumps(current), key=f"panel_data_{x}_{y}")

        col_save, col_reset = st.columns(2)
        with col_save:
            if st.button("Save"):
                try:
                    data = json.loads(raw) if raw.strip() else {}
                except json.JSONDecodeError as e:
                    st.error(f"Invalid JSON: {e}")
                    return
                if _dispatch(store, UpdatePanelData(x, y, data)):
                    st.rerun()
        with col_reset:
            if st.button("Reset panel"):
                if _dispatch(store, ResetPanel(x, y)):
                    st.rerun()

def render_board_main(store: DashboardStore):
    """Renders the board figure and the panel registry."""
    fig = create_board_figure(store.layout, store.rows, store.columns)
    st.plotly_chart(fig, use_container_width=True)

    with st.expander("Panel registry", expanded=False):
        st.dataframe(panels_to_frame(store.layout.panels), use_container_width=True)

    if store.layout.is_dragging:
        with st.expander("Adorner map", expanded=False):
            st.dataframe(occupancy_matrix(store.layout, store.rows, store.columns), use_container_width=True)
