"""
Configuration and Styling Module.

This module contains the configuration and styling variables for the dashboard
builder, including the default grid size and the colour theme used to render
adorner statuses.
"""

# --- Grid Defaults ---
# The board is a fixed grid of rows x columns cells addressed from (1, 1).
DEFAULT_ROWS = 4
DEFAULT_COLUMNS = 4
MAX_GRID_SIZE = 12

# --- Session Keys ---
GRID_SESSION_KEY = 'layout_grid'
STATE_SESSION_KEY = 'layout_state'

# --- Style Theme: Dashboard Board ---
BACKGROUND_COLOR = '#212121' # Dark charcoal for the app background.
PLOT_AREA_COLOR = '#333333'  # Slightly lighter grey behind the board.
GRID_COLOR = '#000000'       # Black cell outlines.
TEXT_COLOR = '#FFFFFF'       # White text for readability on the dark background.

EMPTY_PANEL_COLOR = '#4A4A4A'  # A panel without a data payload.
FILLED_PANEL_COLOR = '#B87333' # A panel carrying a data payload.

# Colours for the adorner overlay, keyed by AdornerStatus value.
ADORNER_COLORS = {
    -1: '#E74C3C', # Conflicting cells.
    0: None,       # Neutral cells keep their panel colour.
    1: '#2ECC71',  # Candidate placement.
}

# Size of one grid cell in figure units.
CELL_SIZE = 100
CELL_GAP = 6
