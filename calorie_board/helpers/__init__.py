"""Side-effect-free helpers used by the Streamlit UI.

Everything here can be called (and tested) without a running Streamlit
session; the `ui` package only wires these functions to widgets.
"""
