"""List display component for showing drinks and their actions."""
import streamlit as st

from drinklist.config.settings import get_streamlit_settings
from drinklist.domain.types import DrinkRecord
from drinklist.services.drink_store import DrinkListStore
from .feedback import show_result


def _render_drink(store: DrinkListStore, drink: DrinkRecord) -> None:
    with st.container(border=True):
        st.subheader(drink.name)
        st.write(f"Type: {drink.category.value}")
        st.write(f"Percentage: {drink.percentage} %")
        st.write(f"Amount: {drink.volume_ml} ml")

        remove_col, edit_col = st.columns(2)
        with remove_col:
            st.button(
                "Remove",
                key=f"remove_{drink.id}",
                on_click=store.remove,
                args=(drink.id,)
            )
        with edit_col:
            st.button(
                "Edit",
                key=f"edit_{drink.id}",
                on_click=lambda: show_result(store.begin_edit(drink.id))
            )


def render_drink_list(store: DrinkListStore) -> None:
    """
    Render the stored drinks in a grid, each with Remove and Edit buttons.

    Args:
        store: Store owning the records
    """
    records = store.records
    if not records:
        st.info("No drinks yet")
        return

    n_columns = get_streamlit_settings().LIST_COLUMNS
    for start in range(0, len(records), n_columns):
        row = records[start:start + n_columns]
        for col, drink in zip(st.columns(n_columns), row):
            with col:
                _render_drink(store, drink)
