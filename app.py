"""
Main Application File for the Dashboard Builder.
A fixed grid of panels that can be resized or moved, with live feedback on
whether the in-progress drag may be committed.
"""
import logging
import streamlit as st

from dashgrid.config import DEFAULT_ROWS, DEFAULT_COLUMNS, MAX_GRID_SIZE
from dashgrid.state import DashboardStore, PanelRegistry, registry_sync_middleware
from dashgrid.utils import load_css
from dashgrid.views.board import render_drag_controls, render_panel_controls, render_board_main

# ==============================================================================
# --- STREAMLIT APP MAIN LOGIC ---
# ==============================================================================

def main() -> None:
    """
    Main function to configure and run the Streamlit application.
    """
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")

    # --- App Configuration ---
    st.set_page_config(layout="wide", page_title="Dashboard Builder")
    load_css("assets/styles.css")

    # --- Sidebar Control Panel ---
    with st.sidebar:
        st.title("🎛️ Control Panel")
        with st.expander("📐 Grid", expanded=True):
            rows = st.number_input("Rows", min_value=1, max_value=MAX_GRID_SIZE, value=DEFAULT_ROWS)
            columns = st.number_input("Columns", min_value=1, max_value=MAX_GRID_SIZE, value=DEFAULT_COLUMNS)

        store = DashboardStore(int(rows), int(columns))
        if 'panel_registry' not in st.session_state:
            st.session_state['panel_registry'] = PanelRegistry()
        store.use(registry_sync_middleware(st.session_state['panel_registry']))

        render_drag_controls(store)
        render_panel_controls(store)

        st.divider()
        if st.button("🗑️ Clear board"):
            store.reset()
            st.rerun()

    st.title("🧩 Dashboard Builder")
    render_board_main(store)

if __name__ == "__main__":
    main()
