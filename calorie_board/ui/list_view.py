"""Streamlit UI for calorie lists."""
from __future__ import annotations

from typing import Iterable, Mapping, Optional, Sequence

import streamlit as st

from calorie_board.helpers.list_view import ItemLike, render_list_html


def render_list(category: str, items: Optional[Iterable[ItemLike]]) -> None:
    """Render a category heading followed by an ordered list of items."""
    st.markdown(render_list_html(category, items), unsafe_allow_html=True)


def render_catalog(catalog: Mapping[str, Sequence[ItemLike]]) -> None:
    """Render one list per category, side by side."""
    st.header("🥕 Calorie Lists")

    if not catalog:
        st.info("The catalog is empty.")
        return

    columns = st.columns(len(catalog))
    for col, (category, items) in zip(columns, catalog.items()):
        with col:
            render_list(category, items)
