"""Streamlit UI for the interactive form.

Widget callbacks run before Streamlit re-executes the script, so the labels
drawn below always reflect the state left behind by the last interaction.
"""
from __future__ import annotations

import streamlit as st

from calorie_board.helpers.form_state import FormController, describe_form


def _controller(prefix: str) -> FormController:
    return FormController(st.session_state, prefix)


# ---------------------------------------------------------------------------
# Widget callbacks
# ---------------------------------------------------------------------------

def _on_set_name(prefix: str) -> None:
    _controller(prefix).set_name_action()


def _on_increment_age(prefix: str) -> None:
    _controller(prefix).increment_age()


def _on_toggle_employed(prefix: str) -> None:
    _controller(prefix).toggle_employed()


def _on_typing(prefix: str) -> None:
    ctrl = _controller(prefix)
    ctrl.on_typing_change(st.session_state[ctrl.widget_key("typing")])


def render_interactive_form(prefix: str = "form") -> None:
    """Render the form whose state lives under ``{prefix}_state``."""
    ctrl = _controller(prefix)
    name_line, typing_line, age_line, employed_line = describe_form(ctrl.state)

    with st.container():
        st.text(name_line)
        st.button(
            "Set Name",
            key=ctrl.widget_key("set_name"),
            on_click=_on_set_name,
            args=(prefix,),
        )

        # Widget state is dropped while the form is hidden; restore it from the cell
        typing_key = ctrl.widget_key("typing")
        if typing_key not in st.session_state:
            st.session_state[typing_key] = ctrl.state.typed_text
        st.text_input(
            "Type something",
            key=typing_key,
            on_change=_on_typing,
            args=(prefix,),
        )
        st.text(typing_line)

        st.text(age_line)
        st.button(
            "Increment Age",
            key=ctrl.widget_key("increment_age"),
            on_click=_on_increment_age,
            args=(prefix,),
        )

        st.text(employed_line)
        st.button(
            "Toggle Status",
            key=ctrl.widget_key("toggle_employed"),
            on_click=_on_toggle_employed,
            args=(prefix,),
        )
