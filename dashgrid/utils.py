import streamlit as st

from dashgrid.config import BACKGROUND_COLOR, TEXT_COLOR, FILLED_PANEL_COLOR

def load_css(file_path: str) -> None:
    """Loads a CSS file and injects it into the Streamlit app."""
    try:
        with open(file_path) as f:
            css = f.read()
    except FileNotFoundError:
        return

    # Define CSS variables from Python config
    css_variables = f"""
    <style>
        :root {{
            --background-color: {BACKGROUND_COLOR};
            --text-color: {TEXT_COLOR};
            --panel-color: {FILLED_PANEL_COLOR};
        }}
        {css}
    </style>
    """
    st.markdown(css_variables, unsafe_allow_html=True)
