"""Drink count and alcohol total."""
import math
import streamlit as st

from drinklist.services.drink_store import DrinkListStore


def format_total(total: float, precision: int) -> str:
    """Format the alcohol total the way the page shows it."""
    if math.isnan(total):
        return "NaN"
    return f"{total:.{precision}f}"


def render_summary(store: DrinkListStore) -> None:
    count_col, total_col = st.columns(2)
    with count_col:
        st.metric("Number of drinks", store.count)
    with total_col:
        st.metric(
            "Total alcohol consumed",
            f"{format_total(store.total_alcohol_ml(), store.precision)} ml"
        )
