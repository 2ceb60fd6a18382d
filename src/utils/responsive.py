"""Compact layout helpers for outreach workers on phones.

A sidebar toggle switches pages to a stacked layout with a shorter shelter
table. The choice is copied out of the widget into ``st.session_state`` so it
survives reruns and page switches, and stays deterministic in tests.
"""
from typing import List, Sequence

import streamlit as st

COMPACT_KEY = "compact_layout"
COMPACT_WIDGET_KEY = "compact_layout_checkbox"
COMPACT_TABLE_COLUMNS = ("Rank", "Shelter Name", "Status", "Available Beds", "Distance")


def is_compact_layout() -> bool:
    return bool(st.session_state.get(COMPACT_KEY, False))


def _remember_compact_choice() -> None:
    st.session_state[COMPACT_KEY] = bool(st.session_state[COMPACT_WIDGET_KEY])


def compact_layout_toggle() -> None:
    """Render the sidebar toggle. Call once per page run.

    Streamlit drops the state of widgets that are not drawn on a run, so the
    checkbox is drawn every time and seeded from the remembered choice.
    """
    st.sidebar.checkbox(
        "Compact layout (phone)",
        value=is_compact_layout(),
        key=COMPACT_WIDGET_KEY,
        on_change=_remember_compact_choice,
    )


def layout_columns(widths: List[float]):
    """``st.columns`` that stacks into containers in compact mode."""
    if is_compact_layout():
        return [st.container() for _ in widths]
    return st.columns(widths)


def table_columns(columns: Sequence[str]) -> List[str]:
    """Columns of the ranked shelter table to show in the current layout."""
    if is_compact_layout():
        return [c for c in columns if c in COMPACT_TABLE_COLUMNS]
    return list(columns)
