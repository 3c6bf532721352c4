"""Form for composing a new drink or editing a stored one."""
import streamlit as st

from drinklist.domain.types import DrinkCategory
from drinklist.services.drink_store import DrinkListStore
from .feedback import show_result

NAME_KEY = "draft_name"
PERCENTAGE_KEY = "draft_percentage"
VOLUME_KEY = "draft_volume"
CATEGORY_KEY = "draft_category"


def _sync_widgets(store: DrinkListStore) -> None:
    """Seed the form widgets from the store's draft before they are drawn."""
    draft = store.draft
    st.session_state[NAME_KEY] = draft.name
    st.session_state[PERCENTAGE_KEY] = draft.percentage
    st.session_state[VOLUME_KEY] = draft.volume_ml
    st.session_state[CATEGORY_KEY] = draft.category


def _format_category(category: DrinkCategory) -> str:
    if category is DrinkCategory.UNDEFINED:
        return "Select drink type"
    return category.value


def render_drink_form(store: DrinkListStore) -> None:
    """
    Render the draft inputs and the Add drink / Save button.

    Args:
        store: Store owning the draft
    """
    _sync_widgets(store)

    name_col, pct_col, vol_col, cat_col, btn_col = st.columns([3, 2, 2, 2, 2])
    with name_col:
        st.text_input(
            "Your drink",
            key=NAME_KEY,
            on_change=lambda: store.change_name(st.session_state[NAME_KEY])
        )
    with pct_col:
        st.text_input(
            "Percentage",
            key=PERCENTAGE_KEY,
            on_change=lambda: store.change_percentage(st.session_state[PERCENTAGE_KEY])
        )
    with vol_col:
        st.text_input(
            "Amount (ml)",
            key=VOLUME_KEY,
            on_change=lambda: store.change_volume(st.session_state[VOLUME_KEY])
        )
    with cat_col:
        st.selectbox(
            "Drink type",
            options=list(DrinkCategory),
            format_func=_format_category,
            key=CATEGORY_KEY,
            on_change=lambda: show_result(
                store.change_category(st.session_state[CATEGORY_KEY])
            )
        )
    with btn_col:
        if store.draft.is_editing:
            st.button(
                "🍺 Save",
                key="save_edit",
                type="primary",
                on_click=lambda: show_result(store.save_edit())
            )
            st.button(
                "Cancel",
                key="cancel_edit",
                on_click=store.cancel_edit
            )
        else:
            st.button(
                "🍺 Add drink",
                key="add_drink",
                type="primary",
                on_click=lambda: show_result(store.add())
            )
